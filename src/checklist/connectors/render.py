# src/checklist/connectors/render.py

"""Plain-text board rendering for the console connector.

The renderer only consumes a TaskView; it never touches the task list.
Colors are plain ANSI SGR codes and are switched off entirely when `color`
is False (non-TTY output, CHECKLIST_COLOR=0, tests).
"""

from __future__ import annotations

import sys

from ..core.ports import SettingsLike
from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_view import TaskView

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"
CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"

TITLE = "To-Do Checklist"
EMPTY_TEXT = "No tasks"
FILTER_LABELS: dict[TaskFilter, str] = {
    TaskFilter.ALL: "All",
    TaskFilter.ACTIVE: "Active",
    TaskFilter.COMPLETED: "Completed",
}


def use_color(settings: SettingsLike) -> bool:
    """Colors only when enabled in settings and stdout is a terminal."""
    return bool(settings.color) and sys.stdout.isatty()


class Painter:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        return "".join(styles) + text + RESET


def _filter_bar(view: TaskView, paint: Painter) -> str:
    parts = []
    for f, label in FILTER_LABELS.items():
        if f is view.task_filter:
            parts.append(paint(f"[{label}]", BOLD, CYAN))
        else:
            parts.append(f" {label} ")
    return " ".join(parts)


def _meta_line(view: TaskView, paint: Painter) -> str:
    left = f"{view.remaining} left"
    if view.can_clear:
        clear = "/clear: Clear completed"
    else:
        clear = paint("(Clear completed: nothing to clear)", DIM)
    return f"{left}  |  {clear}"


def _task_row(pos: int, task: Task, view: TaskView, paint: Painter) -> str:
    box = paint("[x]", GREEN) if task.completed else "[ ]"
    num = paint(f"{pos:>2}.", BOLD)
    if view.is_editing(task.id) and view.edit is not None:
        title = paint(f"> {view.edit.working_title}", YELLOW) + paint("  (editing)", DIM)
    elif task.completed:
        title = paint(task.title, DIM, STRIKE)
    else:
        title = task.title
    return f"{num} {box} {title}"


def render_board(view: TaskView, *, color: bool = False) -> str:
    paint = Painter(color)

    lines = [
        paint(TITLE, BOLD),
        _filter_bar(view, paint),
        _meta_line(view, paint),
        "",
    ]

    if not view.visible:
        lines.append(paint(EMPTY_TEXT, DIM))
    else:
        for pos, task in enumerate(view.visible, start=1):
            lines.append(_task_row(pos, task, view, paint))

    return "\n".join(lines)

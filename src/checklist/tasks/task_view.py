# src/checklist/tasks/task_view.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .task_models import EditSession, Task, TaskFilter


def project(tasks: Sequence[Task], task_filter: TaskFilter) -> list[Task]:
    if task_filter is TaskFilter.ACTIVE:
        return [t for t in tasks if not t.completed]
    if task_filter is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def remaining_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if not t.completed)


def can_clear_completed(tasks: Sequence[Task]) -> bool:
    return remaining_count(tasks) < len(tasks)


@dataclass(frozen=True, slots=True)
class TaskView:
    """Everything a renderer needs for one frame."""

    visible: tuple[Task, ...]
    remaining: int
    total: int
    can_clear: bool
    task_filter: TaskFilter
    edit: EditSession | None

    def is_editing(self, task_id: str) -> bool:
        return self.edit is not None and self.edit.task_id == task_id


def build_view(
    tasks: Sequence[Task],
    task_filter: TaskFilter,
    edit: EditSession | None = None,
) -> TaskView:
    remaining = remaining_count(tasks)
    return TaskView(
        visible=tuple(project(tasks, task_filter)),
        remaining=remaining,
        total=len(tasks),
        can_clear=remaining < len(tasks),
        task_filter=task_filter,
        edit=edit,
    )

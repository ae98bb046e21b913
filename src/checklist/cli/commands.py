# src/checklist/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.render import render_board, use_color
from ..core.state import AppState
from ..tasks.task_models import TaskFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command rest of line".
        Returns a reply string (possibly empty) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, arg = body.partition(" ")
        name = name.lower()
        arg = arg.strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, arg, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_ref(state: AppState, ref: str) -> str | None:
    """
    Map a user reference to a task id.

    Accepts a 1-based position in the currently visible list, a full task id,
    or an unambiguous id prefix.
    """
    ref = ref.strip()
    if not ref:
        return None

    if ref.isdigit():
        visible = state.view().visible
        pos = int(ref)
        if 1 <= pos <= len(visible):
            return visible[pos - 1].id
        return None

    matches = [t.id for t in state.tasks if t.id == ref]
    if matches:
        return matches[0]
    matches = [t.id for t in state.tasks if t.id.startswith(ref)]
    if len(matches) == 1:
        return matches[0]
    return None


def _bad_ref(ref: str, usage: str) -> str:
    if not ref:
        return f"Usage: {usage}"
    return f"No such task: {ref}. Use /list to see task numbers."


def _board(state: AppState) -> str:
    return render_board(state.view(), color=use_color(state.settings))


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg: str) -> str:
    return _board(state)


def cmd_add(state: AppState, arg: str) -> str:
    # Empty titles are ignored without a message.
    state.add(arg)
    return ""


def cmd_toggle(state: AppState, arg: str) -> str:
    task_id = resolve_task_ref(state, arg)
    if task_id is None:
        return _bad_ref(arg, "/toggle <n>")
    state.toggle(task_id)
    return ""


def cmd_edit(state: AppState, arg: str, emit: CommandEmitter | None = None) -> str:
    """
    /edit <n>  -> start editing task n (any other edit in progress is dropped)
    """
    task_id = resolve_task_ref(state, arg)
    if task_id is None:
        return _bad_ref(arg, "/edit <n>")
    state.begin_edit(task_id)
    if emit and state.edit is not None:
        with contextlib.suppress(Exception):
            emit(f"Current title: {state.edit.working_title}")
    return "Type the new title and press Enter (empty line keeps it, /save "" deletes). /cancel to abort."


def cmd_save(state: AppState, arg: str) -> str:
    """
    /save          -> commit the working title as it is
    /save <title>  -> commit <title>
    /save ""       -> commit an empty title (deletes the task)
    """
    if state.edit is None:
        return "Nothing is being edited. Use /edit <n> first."
    if arg in ('""', "''"):
        state.update_edit("", notify=False)
    elif arg:
        state.update_edit(arg, notify=False)
    state.commit_edit()
    return ""


def cmd_cancel(state: AppState, arg: str) -> str:
    if not state.cancel_edit():
        return "Nothing is being edited."
    return ""


def cmd_delete(state: AppState, arg: str) -> str:
    task_id = resolve_task_ref(state, arg)
    if task_id is None:
        return _bad_ref(arg, "/delete <n>")
    state.delete(task_id)
    return ""


def cmd_clear(state: AppState, arg: str) -> str:
    if not state.view().can_clear:
        return "Nothing to clear: no completed tasks."
    removed = state.clear_completed()
    logger.debug("clear_completed removed=%d", removed)
    return ""


def cmd_filter(state: AppState, arg: str) -> str:
    """
    /filter                     -> show the current filter
    /filter all|active|completed
    """
    if not arg:
        return f"Filter is {state.task_filter.value}. Usage: /filter all|active|completed"
    try:
        task_filter = TaskFilter.parse(arg)
    except ValueError:
        return "Usage: /filter all|active|completed"
    state.set_filter(task_filter)
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the board.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.", aliases=["a"])
registry.register("toggle", cmd_toggle, help_text="Complete/reopen task: /toggle <n>.", aliases=["t", "x"])
registry.register("edit", cmd_edit, help_text="Edit a task title: /edit <n>.", aliases=["e"])
registry.register("save", cmd_save, help_text="Commit the edit: /save [title].")
registry.register("cancel", cmd_cancel, help_text="Abort the edit without changes.", aliases=["esc"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n>.", aliases=["del", "rm"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register(
    "filter", cmd_filter, help_text="Show tasks: /filter all | active | completed.", aliases=["f"]
)

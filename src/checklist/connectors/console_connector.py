# src/checklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_view import TaskView
from .render import render_board, use_color

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def _default_write(text: str) -> None:
    print(text, flush=True)


def _prompt(state: AppState) -> str:
    if state.edit is not None:
        return f"edit [{state.edit.working_title}]> "
    return "add> "


def handle_line(state: AppState, line: str, emit: Write | None = None) -> str | None:
    """
    Apply one line of user input.

    Slash commands go to the registry. A plain line commits the edit session
    when one is active (empty line keeps the working title;
    /save "" commits an empty one, which deletes the task), otherwise it adds
    a task. Returns a reply to show, if any.
    """
    if line.startswith("/"):
        return command_registry.handle(state, line, emit=emit)

    if state.edit is not None:
        if line:
            state.update_edit(line, notify=False)
        state.commit_edit()
        return None

    if line:
        state.add(line)
    return None


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: Write = _default_write,
) -> None:
    color = use_color(state.settings)

    def on_change(view: TaskView) -> None:
        write(render_board(view, color=color))

    unsubscribe = state.subscribe(on_change)
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    write(
        "Type a task and press Enter to add it. While editing, the line replaces the title.\n"
        "Use /help for commands, /exit to quit.\n"
    )
    write(render_board(state.view(), color=color))

    try:
        while True:
            try:
                line = read_line(_prompt(state)).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if line.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = handle_line(state, line, emit=write)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                write(reply)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")

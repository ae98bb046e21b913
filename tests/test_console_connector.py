# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from checklist.connectors.console_connector import handle_line, run_console_loop
from checklist.core.state import AppState


def _scripted(lines: list[str]):
    it: Iterator[str] = iter(lines)
    prompts: list[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line, prompts


def test_plain_lines_add_and_commit_edits(state: AppState) -> None:
    handle_line(state, "A")
    handle_line(state, "B")
    handle_line(state, "/edit 2")
    handle_line(state, "A renamed")
    assert [t.title for t in state.tasks] == ["B", "A renamed"]
    assert state.edit is None

    handle_line(state, "/edit 1")
    handle_line(state, "")  # keep the working title
    assert [t.title for t in state.tasks] == ["B", "A renamed"]
    assert state.edit is None

    handle_line(state, "")
    assert len(state.tasks) == 2


def test_console_scenario(state: AppState) -> None:
    read_line, prompts = _scripted(
        ["A", "B", "/toggle 2", "/filter active", "/list", "/edit 1", "/cancel", "/exit", "never read"]
    )
    out: list[str] = []

    run_console_loop(state, read_line=read_line, write=out.append)

    assert [t.title for t in state.tasks] == ["B", "A"]
    assert [t.title for t in state.view().visible] == ["B"]
    assert prompts[-2].startswith("edit [B]")
    assert prompts[-1] == "add> "
    assert "never read" not in "".join(out)
    assert any("1 left" in chunk for chunk in out)
    assert not state.listeners, "loop must unsubscribe its renderer"


def test_console_stops_on_eof_and_reports_crashes(
    state: AppState, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(state, "clear_completed", boom)
    state.add("A")
    state.toggle(state.tasks[0].id)

    read_line, _ = _scripted(["/clear"])
    out: list[str] = []
    run_console_loop(state, read_line=read_line, write=out.append)

    assert "Internal error while handling a command." in out
    assert len(state.tasks) == 1


def test_console_ctrl_c_exits(state: AppState) -> None:
    def read_line(prompt: str) -> str:
        raise KeyboardInterrupt

    out: list[str] = []
    run_console_loop(state, read_line=read_line, write=out.append)
    assert out[-1] == ""


def test_edit_line_goes_through_working_title(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []
    original = state.update_edit

    def spy(text: str, *, notify: bool = True) -> bool:
        seen.append(text)
        return original(text, notify=notify)

    monkeypatch.setattr(state, "update_edit", spy)
    handle_line(state, "A")
    handle_line(state, "/edit 1")
    handle_line(state, "A v2")

    assert seen == ["A v2"]
    assert [t.title for t in state.tasks] == ["A v2"]


def test_edit_to_empty_from_console_deletes(state: AppState) -> None:
    read_line, _ = _scripted(["A", "B", "/edit 2", '/save ""', "/exit"])
    out: list[str] = []

    run_console_loop(state, read_line=read_line, write=out.append)

    assert [t.title for t in state.tasks] == ["B"]
    assert state.edit is None


def test_edit_commit_renders_once(state: AppState) -> None:
    read_line, _ = _scripted(["A", "/edit 1", "A v2"])
    out: list[str] = []

    run_console_loop(state, read_line=read_line, write=out.append)

    boards = [chunk for chunk in out if chunk.startswith("To-Do Checklist")]
    # initial + add + begin edit + commit
    assert len(boards) == 4
    assert "A v2" in boards[-1]


def test_greeting_explains_plain_lines(state: AppState) -> None:
    read_line, _ = _scripted([])
    out: list[str] = []
    run_console_loop(state, read_line=read_line, write=out.append)
    assert "While editing, the line replaces the title." in out[0]

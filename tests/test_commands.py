# tests/test_commands.py

from __future__ import annotations

from checklist.cli.commands import CommandRegistry, registry, resolve_task_ref
from checklist.core.state import AppState
from checklist.tasks.task_models import TaskFilter


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, arg):
        called["h2"] += 1
        return f"h2:{arg}"

    def h3(state, arg, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a", aliases=["alpha"])
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a  keep  inner  spaces ") == "h2:keep  inner  spaces"
    assert reg.handle(state, "/ALPHA x") == "h2:x"
    assert reg.handle(state, "/b y", emit=notes.append) == "h3"
    assert called == {"h2": 2, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/ ") or "")


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/add", "/toggle", "/edit", "/save", "/cancel", "/delete", "/clear", "/filter"):
        assert name in text


def test_positions_follow_active_filter(state: AppState) -> None:
    state.add("A")
    state.add("B")
    state.add("C")  # board: C, B, A
    registry.handle(state, "/toggle 2")  # B done
    registry.handle(state, "/filter active")  # board: C, A

    assert state.task_filter is TaskFilter.ACTIVE
    assert resolve_task_ref(state, "2") == state.tasks[2].id
    registry.handle(state, "/delete 2")
    assert [t.title for t in state.tasks] == ["C", "B"]


def test_resolve_by_id_prefix(state: AppState) -> None:
    a = state.add("A")  # id t1
    assert a is not None
    assert resolve_task_ref(state, a.id) == a.id
    assert resolve_task_ref(state, "t") == a.id
    state.add("B")  # id t2
    assert resolve_task_ref(state, "t") is None
    assert resolve_task_ref(state, "0") is None
    assert resolve_task_ref(state, "9") is None
    assert resolve_task_ref(state, "") is None


def test_bad_references_reply_with_usage(state: AppState) -> None:
    assert (registry.handle(state, "/toggle") or "").startswith("Usage:")
    assert "No such task" in (registry.handle(state, "/delete 3") or "")
    assert "No such task" in (registry.handle(state, "/edit nope") or "")


def test_add_edit_save_flow(state: AppState) -> None:
    assert registry.handle(state, "/add   Buy milk  ") == ""
    assert registry.handle(state, "/add    ") == ""
    assert [t.title for t in state.tasks] == ["Buy milk"]

    emitted: list[str] = []
    reply = registry.handle(state, "/edit 1", emit=emitted.append) or ""
    assert "new title" in reply
    assert emitted == ["Current title: Buy milk"]

    registry.handle(state, "/save Buy oat milk")
    assert state.tasks[0].title == "Buy oat milk"
    assert state.edit is None
    assert "Nothing is being edited" in (registry.handle(state, "/save") or "")
    assert "Nothing is being edited" in (registry.handle(state, "/cancel") or "")


def test_clear_is_refused_when_nothing_completed(state: AppState) -> None:
    state.add("A")
    assert "Nothing to clear" in (registry.handle(state, "/clear") or "")

    registry.handle(state, "/toggle 1")
    assert registry.handle(state, "/clear") == ""
    assert state.tasks == []


def test_filter_command(state: AppState) -> None:
    assert "Filter is all" in (registry.handle(state, "/filter") or "")
    assert "Usage" in (registry.handle(state, "/filter done") or "")
    registry.handle(state, "/f Completed")
    assert state.task_filter is TaskFilter.COMPLETED


def test_list_renders_board(state: AppState) -> None:
    state.add("Walk dog")
    board = registry.handle(state, "/list") or ""
    assert "To-Do Checklist" in board
    assert "1 left" in board
    assert "[ ] Walk dog" in board


def test_save_empty_quotes_deletes_edited_task(state: AppState) -> None:
    state.add("A")
    state.add("B")
    registry.handle(state, "/edit 1")
    assert registry.handle(state, "/save ''") == ""
    assert [t.title for t in state.tasks] == ["A"]
    assert state.edit is None


def test_help_lists_only_registered_commands(state: AppState) -> None:
    lines = (registry.handle(state, "/help") or "").splitlines()
    assert lines[0] == "Available commands:"
    assert all(line.startswith("  /") for line in lines[1:])
    assert not any("/exit" in line for line in lines)

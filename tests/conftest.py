# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from checklist.core.state import AppState
from checklist.tasks.task_store import FileSlotStore, TaskStore

from .fakes import FixedClock, RecordingListener, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="checklist-test",
        log_level="DEBUG",
        color=False,
        data_dir=data_dir,
        storage_dir=data_dir / "storage",
        log_dir=data_dir,
        storage_key="tasks",
    )


@pytest.fixture()
def task_store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(FileSlotStore(settings.storage_dir), slot_name=settings.storage_key)


@pytest.fixture()
def state(settings: SimpleNamespace, task_store: TaskStore) -> AppState:
    """
    AppState wired with deterministic ids and clock.

    NOTE: the real file-backed TaskStore is used here because persistence
    after every intent is part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_store=task_store,
        id_factory=SequentialIds(),
        clock=FixedClock(),
    )


@pytest.fixture()
def listener(state: AppState) -> RecordingListener:
    rec = RecordingListener()
    state.subscribe(rec)
    return rec

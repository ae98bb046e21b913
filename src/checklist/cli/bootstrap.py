# src/checklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the slot store and task store into AppState,
- loads the persisted task snapshot.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import FileSlotStore, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_dir.mkdir(parents=True, exist_ok=True)
    settings.log_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load persisted tasks.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(FileSlotStore(settings.storage_dir), slot_name=settings.storage_key)
    state = AppState(settings=settings, task_store=task_store)
    state.load()
    return state

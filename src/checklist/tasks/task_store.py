# src/checklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import re
from collections.abc import Sequence
from pathlib import Path

from ..core.ports import SlotStore
from .task_models import Task

logger = logging.getLogger(__name__)

_SLOT_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _check_slot_name(name: str) -> str:
    if not name or not _SLOT_NAME_RE.match(name) or name.startswith("."):
        raise ValueError(f"invalid slot name: {name!r}")
    return name


class FileSlotStore:
    """
    Directory-backed key-value store.

    Each named slot is one UTF-8 text file `<dir>/<name>.json`.
    Writes go through a temp file + os.replace so a crash never leaves a
    half-written slot behind.
    """

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, name: str) -> Path:
        return self._dir / f"{_check_slot_name(name)}.json"

    def get(self, name: str) -> str | None:
        path = self._path(name)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    def set(self, name: str, text: str) -> None:
        path = self._path(name)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(text, "utf-8")
        os.replace(tmp, path)
        with contextlib.suppress(OSError):
            os.chmod(path, 0o600)

    def remove(self, name: str) -> None:
        with contextlib.suppress(FileNotFoundError):
            self._path(name).unlink()


class MemorySlotStore:
    """In-process slot store (tests, ephemeral runs)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> str | None:
        return self._slots.get(_check_slot_name(name))

    def set(self, name: str, text: str) -> None:
        self._slots[_check_slot_name(name)] = text

    def remove(self, name: str) -> None:
        self._slots.pop(_check_slot_name(name), None)


def encode_snapshot(tasks: Sequence[Task]) -> str:
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False)


def decode_snapshot(text: str) -> list[Task]:
    """Strict decode; raises ValueError on any shape mismatch."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"snapshot must be a list, got {type(data).__name__}")

    tasks = [Task.from_record(item) for item in data]

    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise ValueError(f"duplicate task id {t.id}")
        seen.add(t.id)
    return tasks


class TaskStore:
    """
    Persists the full task list as one snapshot in a named slot.

    - load(): never raises; missing or corrupt data yields []
    - save(): overwrites the slot with the full list (no deltas, no merge)
    """

    def __init__(self, slots: SlotStore, slot_name: str = "tasks") -> None:
        self._slots = slots
        self._slot_name = _check_slot_name(slot_name)
        logger.info("TaskStore ready slot=%s", self._slot_name)

    @property
    def slot_name(self) -> str:
        return self._slot_name

    def load(self) -> list[Task]:
        try:
            raw = self._slots.get(self._slot_name)
        except Exception:
            logger.warning("Failed to read slot=%s; starting empty.", self._slot_name, exc_info=True)
            return []

        if raw is None or not raw.strip():
            logger.debug("Slot %s is empty; starting with no tasks.", self._slot_name)
            return []

        try:
            tasks = decode_snapshot(raw)
        except (ValueError, TypeError, OverflowError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError subclass; deep nesting hits RecursionError.
            logger.warning("Corrupt snapshot in slot=%s (%s); starting empty.", self._slot_name, e)
            return []

        logger.debug("Loaded %d tasks from slot=%s", len(tasks), self._slot_name)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        self._slots.set(self._slot_name, encode_snapshot(tasks))
        logger.debug("Saved %d tasks to slot=%s", len(tasks), self._slot_name)

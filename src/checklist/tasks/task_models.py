# src/checklist/tasks/task_models.py

from __future__ import annotations

import math
import time
import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Which subset of the task list is shown. Transient UI state, never persisted."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        if not raw or not raw.strip():
            raise ValueError("filter is required")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown filter: {raw!r}") from None


def new_task_id() -> str:
    """Random 128-bit identifier; collisions are not handled."""
    return str(uuid.uuid4())


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    completed: bool
    created_at: int

    def to_record(self) -> dict[str, Any]:
        """Persisted shape: {id, title, completed, createdAt}."""
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Strict inverse of to_record().

        Any shape mismatch raises ValueError; callers treat that as corruption
        of the whole snapshot.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        tid = raw.get("id")
        title = raw.get("title")
        completed = raw.get("completed")
        created_at = raw.get("createdAt")

        if not isinstance(tid, str) or not tid:
            raise ValueError("task record has no valid id")
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"task {tid} has no valid title")
        if not isinstance(completed, bool):
            raise ValueError(f"task {tid} has no valid completed flag")
        # bool is an int subclass; reject it explicitly.
        if isinstance(created_at, bool) or not isinstance(created_at, (int, float)):
            raise ValueError(f"task {tid} has no valid createdAt")
        if isinstance(created_at, float) and not math.isfinite(created_at):
            raise ValueError(f"task {tid} has a non-finite createdAt")

        return cls(id=tid, title=title, completed=completed, created_at=int(created_at))


@dataclass(frozen=True, slots=True)
class EditSession:
    task_id: str
    working_title: str

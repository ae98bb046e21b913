# src/checklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete implementations,
so storage and renderers stay swappable and tests can use fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task
from ..tasks.task_view import TaskView


class SettingsLike(Protocol):
    """The part of Settings the controller and connectors read."""

    @property
    def app_name(self) -> str: ...
    @property
    def color(self) -> bool: ...


class TaskRepo(Protocol):
    """Snapshot persistence: the full list in, the full list out."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...


class SlotStore(Protocol):
    """Named key-value text slots (browser-local-storage style)."""

    def get(self, name: str) -> str | None: ...
    def set(self, name: str, text: str) -> None: ...
    def remove(self, name: str) -> None: ...


class ViewListener(Protocol):
    """Called after every state change with a freshly projected view."""

    def __call__(self, view: TaskView) -> None: ...

# src/checklist/tasks/task_list.py

"""
Pure transformations over the task sequence.

Every function takes the current sequence and returns a new list; the input is
never mutated. Add prepends; everything else keeps relative order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace

from .task_models import Task, new_task_id, now_ms

IdFactory = Callable[[], str]
Clock = Callable[[], int]


def add_task(
    tasks: Sequence[Task],
    title: str,
    *,
    id_factory: IdFactory = new_task_id,
    clock: Clock = now_ms,
) -> list[Task]:
    clean = title.strip()
    if not clean:
        return list(tasks)
    task = Task(id=id_factory(), title=clean, completed=False, created_at=clock())
    return [task, *tasks]


def toggle_task(tasks: Sequence[Task], task_id: str) -> list[Task]:
    return [replace(t, completed=not t.completed) if t.id == task_id else t for t in tasks]


def rename_task(tasks: Sequence[Task], task_id: str, title: str) -> list[Task]:
    """Set the trimmed title; an empty result deletes the task instead."""
    clean = title.strip()
    if not clean:
        return delete_task(tasks, task_id)
    return [replace(t, title=clean) if t.id == task_id else t for t in tasks]


def delete_task(tasks: Sequence[Task], task_id: str) -> list[Task]:
    return [t for t in tasks if t.id != task_id]


def clear_completed(tasks: Sequence[Task]) -> list[Task]:
    return [t for t in tasks if not t.completed]


def find_task(tasks: Sequence[Task], task_id: str) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None

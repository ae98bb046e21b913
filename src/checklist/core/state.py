# src/checklist/core/state.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..tasks import task_list
from ..tasks.task_models import EditSession, Task, TaskFilter, new_task_id, now_ms
from ..tasks.task_view import TaskView, build_view
from .ports import SettingsLike, TaskRepo, ViewListener

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Controller: owns the canonical task list, the active filter and the edit session.

    Every intent runs synchronously:
      mutate in memory -> persist the full snapshot -> notify listeners.
    Intents that change nothing neither persist nor notify.
    """

    settings: SettingsLike
    task_store: TaskRepo

    tasks: list[Task] = field(default_factory=list)
    task_filter: TaskFilter = TaskFilter.ALL
    edit: EditSession | None = None

    id_factory: Callable[[], str] = new_task_id
    clock: Callable[[], int] = now_ms
    listeners: list[ViewListener] = field(default_factory=list)

    # ---- observers ----

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        self.listeners.append(listener)

        def unsubscribe() -> None:
            self.listeners[:] = [cb for cb in self.listeners if cb is not listener]

        return unsubscribe

    def view(self) -> TaskView:
        return build_view(self.tasks, self.task_filter, self.edit)

    def _notify(self) -> None:
        view = self.view()
        for listener in list(self.listeners):
            listener(view)

    def _commit(self, new_tasks: Sequence[Task], *, reason: str) -> bool:
        new_list = list(new_tasks)
        if new_list == self.tasks:
            return False
        self.tasks = new_list
        self.task_store.save(self.tasks)
        logger.debug("Tasks %s -> total=%d", reason, len(self.tasks))

        # An edit session cannot outlive its task.
        if self.edit is not None and task_list.find_task(self.tasks, self.edit.task_id) is None:
            logger.debug("Edit session on %s dropped (task gone).", self.edit.task_id)
            self.edit = None
        return True

    # ---- task intents ----

    def load(self) -> None:
        self.tasks = self.task_store.load()
        self.edit = None
        logger.info("Loaded %d tasks.", len(self.tasks))
        self._notify()

    def add(self, title: str) -> Task | None:
        changed = self._commit(
            task_list.add_task(self.tasks, title, id_factory=self.id_factory, clock=self.clock),
            reason="add",
        )
        if not changed:
            return None
        self._notify()
        return self.tasks[0]

    def toggle(self, task_id: str) -> bool:
        changed = self._commit(task_list.toggle_task(self.tasks, task_id), reason="toggle")
        if changed:
            self._notify()
        return changed

    def delete(self, task_id: str) -> bool:
        changed = self._commit(task_list.delete_task(self.tasks, task_id), reason="delete")
        if changed:
            self._notify()
        return changed

    def clear_completed(self) -> int:
        before = len(self.tasks)
        if self._commit(task_list.clear_completed(self.tasks), reason="clear_completed"):
            self._notify()
        return before - len(self.tasks)

    # ---- edit session ----

    def begin_edit(self, task_id: str) -> bool:
        task = task_list.find_task(self.tasks, task_id)
        if task is None:
            return False
        if self.edit is not None and self.edit.task_id != task_id:
            logger.debug("Edit session on %s cancelled by new edit.", self.edit.task_id)
        self.edit = EditSession(task_id=task.id, working_title=task.title)
        self._notify()
        return True

    def update_edit(self, text: str, *, notify: bool = True) -> bool:
        """Replace the working title. notify=False when a commit follows immediately."""
        if self.edit is None:
            return False
        self.edit = EditSession(task_id=self.edit.task_id, working_title=text)
        if notify:
            self._notify()
        return True

    def commit_edit(self, task_id: str | None = None, working_title: str | None = None) -> bool:
        """
        Commit the working title of the edit session.

        An empty (after trim) title deletes the task. The session ends either way.
        Returns True if the task list changed.
        """
        session = self.edit
        if task_id is None:
            if session is None:
                return False
            task_id = session.task_id
        if working_title is None:
            if session is None or session.task_id != task_id:
                return False
            working_title = session.working_title

        self.edit = None
        changed = self._commit(
            task_list.rename_task(self.tasks, task_id, working_title),
            reason="commit_edit",
        )
        self._notify()
        return changed

    def cancel_edit(self) -> bool:
        if self.edit is None:
            return False
        self.edit = None
        self._notify()
        return True

    # ---- filter ----

    def set_filter(self, task_filter: TaskFilter) -> None:
        if task_filter is self.task_filter:
            return
        self.task_filter = task_filter
        self._notify()

# todo_list_app/task_store.py

"""
In-memory task list for one screen (one Streamlit session).

The store is the only owner of task data. The view reads it through
list_tasks()/draft/counts() and forwards gestures to add_task(),
toggle_complete() and delete_task(). Invalid requests (blank text, unknown id)
are silently ignored.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from typing import NamedTuple

logger = logging.getLogger(__name__)

Listener = Callable[[], None]

MAX_ID_ATTEMPTS = 100


def _new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class Task:
    """One to-do entry. Frozen: toggling swaps in a copy."""

    id: str
    text: str
    completed: bool = False


class TaskCounts(NamedTuple):
    total: int
    completed: int
    active: int


class TaskStore:
    """Ordered tasks (insertion order) plus the not-yet-submitted draft text."""

    def __init__(self, id_factory: Callable[[], str] = _new_task_id) -> None:
        self._tasks: list[Task] = []
        self._draft = ""
        self._id_factory = id_factory
        self._listeners: list[Listener] = []
        # grows for the whole session (deleted ids included); lists are tens of tasks
        self._issued_ids: set[str] = set()

    # --- Read side ---

    def list_tasks(self) -> list[Task]:
        """Snapshot of the tasks at call time."""
        return list(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def counts(self) -> TaskCounts:
        total = len(self._tasks)
        completed = sum(1 for task in self._tasks if task.completed)
        return TaskCounts(total=total, completed=completed, active=total - completed)

    @property
    def draft(self) -> str:
        return self._draft

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list_tasks())

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self._tasks)

    # --- Operations ---

    def add_task(self, text: str) -> Task | None:
        """
        Append a new task with the trimmed text.

        Blank (or non-string) text is ignored and None is returned.
        """
        cleaned = text.strip() if isinstance(text, str) else ""
        if not cleaned:
            logger.debug("Ignoring blank task text.")
            return None

        task = Task(id=self._unused_id(), text=cleaned)
        self._tasks.append(task)
        logger.debug("Added task id=%s (total=%d)", task.id, len(self._tasks))
        self._notify()
        return task

    def toggle_complete(self, task_id: str) -> None:
        index = self._index_of(task_id)
        if index is None:
            logger.debug("toggle_complete: no task with id=%s", task_id)
            return

        task = self._tasks[index]
        self._tasks[index] = replace(task, completed=not task.completed)
        logger.debug("Toggled task id=%s completed=%s", task_id, not task.completed)
        self._notify()

    def delete_task(self, task_id: str) -> None:
        index = self._index_of(task_id)
        if index is None:
            logger.debug("delete_task: no task with id=%s", task_id)
            return

        del self._tasks[index]
        logger.debug("Deleted task id=%s (total=%d)", task_id, len(self._tasks))
        self._notify()

    def set_draft(self, text: str) -> None:
        text = text if isinstance(text, str) else ""
        if text == self._draft:
            return
        self._draft = text
        self._notify()

    def submit_draft(self) -> Task | None:
        """Add the draft as a task; the draft is cleared only if a task was added."""
        task = self.add_task(self._draft)
        if task is not None:
            self.set_draft("")
        return task

    # --- Change notification ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener()` after every change to tasks or draft.
        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Task store listener %r failed.", listener)

    # --- Internals ---

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _unused_id(self) -> str:
        # never hand out an id twice, even after the task holding it was deleted
        for _ in range(MAX_ID_ATTEMPTS):
            task_id = str(self._id_factory())
            if task_id not in self._issued_ids:
                self._issued_ids.add(task_id)
                return task_id

        logger.warning(
            "id_factory returned used ids %d times in a row, falling back to uuid4.",
            MAX_ID_ATTEMPTS,
        )
        task_id = _new_task_id()
        while task_id in self._issued_ids:
            task_id = _new_task_id()
        self._issued_ids.add(task_id)
        return task_id

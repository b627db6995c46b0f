# src/todo_list/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterator

from ..core.ports import ChangeListener
from .errors import TaskIndexError, TaskNotFoundError
from .task_models import ChangeKind, Task, TaskChange

logger = logging.getLogger(__name__)


class TaskListStore:
    """
    In-memory ordered task list.

    Layout:
    - `_tasks` maps task id -> Task snapshot
    - `_order` holds ids in display (insertion) order
    Both always contain the same id set.

    Ids come from a counter that starts at 1 and is never rewound, so an id
    is never reused within the store's lifetime (not even after clear()).

    Every applied mutation bumps `revision` by one and then notifies
    listeners synchronously, in subscription order. A rejected add()
    changes nothing and notifies nobody.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._order: list[int] = []
        self._next_id = 1
        self._revision = 0
        self._listeners: list[ChangeListener] = []
        logger.debug("TaskListStore created")

    # ---- read API ----

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks())

    @property
    def revision(self) -> int:
        return self._revision

    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the list in display order."""
        return tuple(self._tasks[tid] for tid in self._order)

    def get(self, task_id: int) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def index_of(self, task_id: int) -> int:
        if task_id not in self._tasks:
            raise TaskNotFoundError(task_id)
        return self._order.index(task_id)

    def id_at(self, index: int) -> int:
        # Negative indexes are contract violations, not "from the end".
        if not 0 <= index < len(self._order):
            raise TaskIndexError(index, len(self._order))
        return self._order[index]

    # ---- observers ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Register a listener; returns a callable that unregisters it.
        Calling the returned function more than once is a no-op.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(
        self,
        kind: ChangeKind,
        *,
        task: Task | None = None,
        position: int | None = None,
        removed: tuple[Task, ...] = (),
    ) -> TaskChange:
        self._revision += 1
        change = TaskChange(
            kind=kind,
            revision=self._revision,
            task=task,
            position=position,
            removed=removed,
        )
        # Copy: a listener may unsubscribe itself while being notified.
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Task list listener failed kind=%s rev=%s", kind, self._revision)
        return change

    # ---- mutations (by id) ----

    def add(self, title: str) -> int | None:
        """
        Append a new, not-done task and return its id.
        The empty string is rejected silently (returns None).
        """
        if title == "":
            logger.debug("Rejected empty task title")
            return None

        task_id = self._next_id
        self._next_id += 1

        task = Task(id=task_id, title=title, done=False)
        self._tasks[task_id] = task
        self._order.append(task_id)
        logger.debug("Task added id=%s position=%s", task_id, len(self._order) - 1)

        self._commit(ChangeKind.ADDED, task=task, position=len(self._order) - 1)
        return task_id

    def toggle_task(self, task_id: int) -> Task:
        old = self.get(task_id)
        task = Task(id=old.id, title=old.title, done=not old.done)
        self._tasks[task_id] = task
        position = self._order.index(task_id)
        logger.debug("Task toggled id=%s done=%s", task_id, task.done)

        self._commit(ChangeKind.TOGGLED, task=task, position=position)
        return task

    def remove_task(self, task_id: int) -> Task:
        position = self.index_of(task_id)
        del self._order[position]
        task = self._tasks.pop(task_id)
        logger.debug("Task removed id=%s position=%s", task_id, position)

        self._commit(ChangeKind.REMOVED, task=task, position=position)
        return task

    # ---- mutations (by position) ----

    def toggle(self, index: int) -> None:
        self.toggle_task(self.id_at(index))

    def remove(self, index: int) -> None:
        self.remove_task(self.id_at(index))

    def clear(self) -> None:
        """Remove every task as one transition (one CLEARED notification)."""
        removed = self.tasks()
        self._tasks.clear()
        self._order.clear()
        logger.debug("Task list cleared removed=%s", len(removed))

        self._commit(ChangeKind.CLEARED, removed=removed)

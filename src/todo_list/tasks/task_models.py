# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ChangeKind(StrEnum):
    """What a single store mutation did."""

    ADDED = "added"
    TOGGLED = "toggled"
    REMOVED = "removed"
    CLEARED = "cleared"


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    done: bool = False


@dataclass(frozen=True, slots=True)
class TaskChange:
    """
    Notification delivered to store listeners after a mutation is applied.

    Notes:
    - `task` is the snapshot after the change (the removed task for REMOVED).
    - `position` is the task's index after add/toggle, or before removal.
    - CLEARED carries no task/position; the removed tasks are in `removed`.
    """

    kind: ChangeKind
    revision: int
    task: Task | None = None
    position: int | None = None
    removed: tuple[Task, ...] = ()

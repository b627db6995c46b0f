# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation side.

Commands and connectors depend on these Protocols rather than on the concrete
store, so a different task list backend (or a fake in tests) can be plugged in.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task, TaskChange


class ChangeListener(Protocol):
    """Called once per applied mutation, after the state is updated."""
    def __call__(self, change: TaskChange) -> None: ...


class TaskRepo(Protocol):
    # Read side (rendering)
    def __len__(self) -> int: ...
    def tasks(self) -> tuple[Task, ...]: ...
    def get(self, task_id: int) -> Task: ...
    def index_of(self, task_id: int) -> int: ...
    def id_at(self, index: int) -> int: ...

    @property
    def revision(self) -> int: ...

    # Mutations
    def add(self, title: str) -> int | None: ...
    def toggle(self, index: int) -> None: ...
    def remove(self, index: int) -> None: ...
    def clear(self) -> None: ...
    def toggle_task(self, task_id: int) -> Task: ...
    def remove_task(self, task_id: int) -> Task: ...

    # Observers
    def subscribe(self, listener: ChangeListener) -> Callable[[], None]: ...

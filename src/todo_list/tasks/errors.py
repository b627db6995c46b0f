# src/todo_list/tasks/errors.py

from __future__ import annotations


class TaskListError(Exception):
    """Base error for task list operations."""


class TaskIndexError(TaskListError, IndexError):
    """A position outside [0, length) was passed to a positional operation."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"task index {index} out of range for list of {length}")


class TaskNotFoundError(TaskListError, KeyError):
    """No task with the given id exists in the store."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(task_id)

    def __str__(self) -> str:
        return f"no task with id {self.task_id}"

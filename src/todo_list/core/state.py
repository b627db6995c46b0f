# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    """
    Everything one screen owns for its lifetime.

    `input_buffer` is the pending text of the "new task" field; it is cleared
    after every submit, whether the title was accepted or not.
    """

    # Settings object (config.Settings or a test double with the same attributes).
    settings: object

    task_store: TaskRepo
    input_buffer: str = ""

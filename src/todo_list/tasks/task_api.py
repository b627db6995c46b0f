# src/todo_list/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)


def set_input(state: AppState, text: str) -> None:
    state.input_buffer = text


def submit_input(state: AppState) -> int | None:
    """
    Submit the "new task" field: add its text as a task, then clear it.
    The buffer is cleared even when the store rejects the title.
    """
    title = state.input_buffer
    try:
        task_id = state.task_store.add(title)
    finally:
        state.input_buffer = ""

    if task_id is None:
        logger.debug("Submit ignored: empty title")
    return task_id


def toggle_at(state: AppState, position: int) -> Task:
    """Flip the done flag of the task shown at `position` (0-based)."""
    store = state.task_store
    return store.toggle_task(store.id_at(position))


def dismiss_at(state: AppState, position: int) -> Task:
    """
    Remove the task shown at `position` (0-based) and return it, so the
    caller can confirm what was removed.
    """
    store = state.task_store
    task = store.remove_task(store.id_at(position))
    logger.info("Task dismissed id=%s", task.id)
    return task


def clear_all(state: AppState) -> int:
    store = state.task_store
    count = len(store)
    store.clear()
    logger.info("Cleared %d task(s)", count)
    return count

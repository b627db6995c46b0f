# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.tasks.task_store import TaskListStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the presentation code.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment (and any local .env).
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        lowercase_titles=True,
        ansi=False,
        console_enabled=True,
    )


@pytest.fixture()
def store() -> TaskListStore:
    return TaskListStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskListStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def seeded(store: TaskListStore) -> TaskListStore:
    """Store holding A, B, C (none done)."""
    for title in ("A", "B", "C"):
        store.add(title)
    return store

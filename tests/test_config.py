# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list import config
from todo_list.config import Settings

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_DATA_DIR",
    "TODO_LOWERCASE_TITLES",
    "TODO_ANSI",
    "TODO_CONSOLE_ENABLED",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_stdout_is_tty", lambda: False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.data_dir == Path(".local/todo")
    assert s.lowercase_titles is True
    assert s.ansi is False
    assert s.console_enabled is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "groceries")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_LOWERCASE_TITLES", "off")
    monkeypatch.setenv("TODO_ANSI", "yes")
    monkeypatch.setenv("TODO_CONSOLE_ENABLED", "0")

    s = Settings.from_env()

    assert s.app_name == "groceries"
    assert s.log_level == "DEBUG"
    assert s.data_dir == tmp_path
    assert s.lowercase_titles is False
    assert s.ansi is True
    assert s.console_enabled is False


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "   ")
    monkeypatch.setenv("TODO_LOWERCASE_TITLES", "")
    monkeypatch.setenv("TODO_DATA_DIR", " ")

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.lowercase_titles is True
    assert s.data_dir == Path(".local/todo")


def test_ansi_defaults_to_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "_stdout_is_tty", lambda: True)
    assert Settings.from_env().ansi is True


def test_settings_are_frozen() -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.app_name = "other"  # type: ignore[misc]

# tests/test_render.py

from __future__ import annotations

from types import SimpleNamespace

from todo_list.tasks.task_models import Task
from todo_list.ui.render import EMPTY_HINT, TaskRow, project_rows, render_tasks, render_text


def test_project_rows_keys_by_id_and_lowercases() -> None:
    tasks = [Task(id=7, title="Buy MILK"), Task(id=9, title="Walk Dog", done=True)]

    rows = project_rows(tasks)

    assert rows == [
        TaskRow(position=0, key=7, label="buy milk", done=False),
        TaskRow(position=1, key=9, label="walk dog", done=True),
    ]
    assert project_rows(tasks, lowercase=False)[0].label == "Buy MILK"


def test_render_text_plain_and_ansi() -> None:
    rows = [
        TaskRow(position=0, key=1, label="a", done=False),
        TaskRow(position=1, key=2, label="b", done=True),
    ]

    assert render_text(rows) == " 1. [ ] a\n 2. [x] b"

    styled = render_text(rows, ansi=True).splitlines()
    assert styled[0] == " 1. [ ] a"
    assert "\033[9m" in styled[1] and styled[1].endswith("b\033[0m")


def test_render_empty_list_shows_hint() -> None:
    assert render_text([]) == EMPTY_HINT
    assert render_tasks((), SimpleNamespace()) == EMPTY_HINT


def test_render_tasks_reads_display_options_from_settings() -> None:
    tasks = [Task(id=1, title="Mixed Case")]
    opts = SimpleNamespace(lowercase_titles=False, ansi=False)
    assert render_tasks(tasks, opts) == " 1. [ ] Mixed Case"

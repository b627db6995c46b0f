# src/todo_list/ui/render.py

"""
Rendering projection of the task list.

`project_rows` turns store snapshots into display rows; `render_text` turns
rows into plain text for the console. Rows are keyed by task id, so a row
keeps its key when tasks above it are removed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..tasks.task_models import Task

EMPTY_HINT = "No tasks yet. Type a title (or /add <title>) to create one."

_STRIKE = "\033[9m"
_DIM = "\033[2m"
_RESET = "\033[0m"


@dataclass(frozen=True, slots=True)
class TaskRow:
    position: int
    key: int
    label: str
    done: bool


def project_rows(tasks: Iterable[Task], *, lowercase: bool = True) -> list[TaskRow]:
    rows: list[TaskRow] = []
    for i, task in enumerate(tasks):
        label = task.title.lower() if lowercase else task.title
        rows.append(TaskRow(position=i, key=task.id, label=label, done=task.done))
    return rows


def render_row(row: TaskRow, *, ansi: bool = False) -> str:
    mark = "[x]" if row.done else "[ ]"
    label = row.label
    if row.done and ansi:
        label = f"{_DIM}{_STRIKE}{label}{_RESET}"
    return f"{row.position + 1:>2}. {mark} {label}"


def render_text(rows: Iterable[TaskRow], *, ansi: bool = False) -> str:
    lines = [render_row(r, ansi=ansi) for r in rows]
    if not lines:
        return EMPTY_HINT
    return "\n".join(lines)


def render_tasks(tasks: Iterable[Task], settings: object) -> str:
    """Project and render with the display options found on `settings`."""
    rows = project_rows(tasks, lowercase=bool(getattr(settings, "lowercase_titles", True)))
    return render_text(rows, ansi=bool(getattr(settings, "ansi", False)))

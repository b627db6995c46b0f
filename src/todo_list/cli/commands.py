# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.errors import TaskListError
from ..tasks.task_api import clear_all, dismiss_at, set_input, submit_input, toggle_at
from ..ui.render import render_tasks

# Handlers get the text after the command name, unsplit ("" when absent).
CommandHandler = Callable[[AppState, str], str]

EXIT_COMMANDS = ("exit", "quit")

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, rest)
        except TaskListError as e:
            logger.info("Command /%s rejected: %s", name, e)
            return f"Cannot do that: {e}."

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  " + " | ".join(f"/{c}" for c in EXIT_COMMANDS) + " - Leave the console.")
        lines.append("Any other line is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_position(rest: str, usage: str) -> int | str:
    """
    Turn a 1-based position typed by the user into a 0-based index.
    Returns a usage message (str) if the argument is missing or not a number.
    """
    args = rest.split()
    if len(args) != 1:
        return usage
    try:
        n = int(args[0])
    except ValueError:
        return usage
    return n - 1


def cmd_help(state: AppState, rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, rest: str) -> str:
    return render_tasks(state.task_store.tasks(), state.settings)


def cmd_add(state: AppState, rest: str) -> str:
    """
    /add <title>  -> append a new task
    """
    set_input(state, rest)
    task_id = submit_input(state)
    if task_id is None:
        return "Usage: /add <title>. Empty titles are ignored."
    return f"Added task #{len(state.task_store)}."


def cmd_done(state: AppState, rest: str) -> str:
    """
    /done <n>  -> mark task n done (or not done again)
    """
    pos = _parse_position(rest, "Usage: /done <n>, where n is the number shown in /list.")
    if isinstance(pos, str):
        return pos
    task = toggle_at(state, pos)
    return f"Task #{pos + 1} marked {'done' if task.done else 'not done'}."


def cmd_rm(state: AppState, rest: str) -> str:
    """
    /rm <n>  -> delete task n; tasks below it move up by one
    """
    pos = _parse_position(rest, "Usage: /rm <n>, where n is the number shown in /list.")
    if isinstance(pos, str):
        return pos
    task = dismiss_at(state, pos)
    return f"Removed: {task.title}"


def cmd_clear(state: AppState, rest: str) -> str:
    count = clear_all(state)
    return f"Cleared {count} task(s)."


def cmd_status(state: AppState, rest: str) -> str:
    store = state.task_store
    tasks = store.tasks()
    done = sum(1 for t in tasks if t.done)
    app_name = str(getattr(state.settings, "app_name", "todo"))
    return (
        f"Status ({app_name}):\n"
        f"  Tasks: {len(tasks)} ({done} done, {len(tasks) - done} open)\n"
        f"  Revision: {store.revision}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register(
    "done", cmd_done, help_text="Toggle done for task n: /done <n>.", aliases=["toggle"]
)
registry.register("rm", cmd_rm, help_text="Delete task n: /rm <n>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete every task.")
registry.register("status", cmd_status, help_text="Show task counts.")

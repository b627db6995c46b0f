# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import EXIT_COMMANDS
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_api import set_input, submit_input
from ..tasks.task_models import TaskChange
from ..ui.render import render_tasks

logger = logging.getLogger(__name__)

PROMPT = "todo> "


def render_list(state: AppState) -> str:
    return render_tasks(state.task_store.tasks(), state.settings)


def run_console_loop(state: AppState) -> None:
    """
    Interactive REPL over the task list.

    Every line is either a /command or the title of a new task. After each
    line the list is re-rendered if the store changed while handling it.
    """
    store = state.task_store
    app_name = str(getattr(state.settings, "app_name", "todo"))

    changes: list[TaskChange] = []
    unsubscribe = store.subscribe(changes.append)

    logger.info("Console connector started.")
    print(f"[{app_name}] Type a task title to add it. Use /help for commands, /exit to quit.\n")
    print(render_list(state))

    try:
        while True:
            try:
                user_input = input(PROMPT).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in tuple(f"/{c}" for c in EXIT_COMMANDS):
                logger.info("Console exit command received.")
                break

            changes.clear()

            try:
                reply = command_registry.handle(state, user_input)
                if reply is None:
                    set_input(state, user_input)
                    submit_input(state)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                print(reply)
            if changes:
                print(render_list(state))
    finally:
        unsubscribe()

    logger.info("Console connector finished.")

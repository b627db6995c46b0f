# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (with an empty task list), then runs the
console REPL in the main thread. The list is discarded on exit.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = getattr(settings, "data_dir", ".local/todo")
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", getattr(settings, "app_name", "todo"), log_file)

    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.warning("Console disabled (TODO_CONSOLE_ENABLED=false); nothing to run.")
    finally:
        logger.info("Bye. Discarding %d task(s).", len(state.task_store))


if __name__ == "__main__":
    main()

# src/duke/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads saved tasks, then runs the
console REPL in the main thread until bye/exit or end of input.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..presentation import farewell_message, welcome_message
from .bootstrap import create_initial_state, load_saved_tasks

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.log_dir if settings.file_logging else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)

    print(welcome_message(settings.app_name), end="", flush=True)
    notice = load_saved_tasks(state)
    if notice is not None:
        print(notice, end="", flush=True)

    try:
        run_console_loop(state)
    finally:
        print(farewell_message(), end="", flush=True)
        logger.info("Bye.")


if __name__ == "__main__":
    main()

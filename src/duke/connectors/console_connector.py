# src/duke/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.interpreter import handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("bye", "exit")
INTERNAL_ERROR_MESSAGE = "Internal error while handling a command."


def run_console_loop(state: AppState) -> None:
    """
    Read commands from stdin until bye/exit or end of input.

    Each line is fully handled (including the file rewrite) before the next
    one is read. No error ends the loop.
    """
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    while True:
        try:
            user_input = input().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = INTERNAL_ERROR_MESSAGE

        print(reply, end="" if reply.endswith("\n") else "\n", flush=True)

    logger.info("Console connector finished.")

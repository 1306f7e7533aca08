# src/duke/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the TaskStore into AppState,
- loads saved tasks (a missing or unreadable file means an empty start).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import PersistenceError
from ..presentation import format_error
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState (with an empty task list) from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, task_store=TaskStore(settings.tasks_path))


def load_saved_tasks(state: AppState) -> str | None:
    """
    Fill state.tasks from the store.

    Returns a framed notice when nothing could be loaded, None otherwise.
    """
    try:
        tasks = state.task_store.load()
    except PersistenceError as e:
        logger.info("Starting with no saved tasks: %s", e)
        state.tasks = []
        return format_error(f"{e}\nLet's start a new list!")

    state.tasks = tasks
    logger.info("Loaded %d saved tasks from %s", len(tasks), state.task_store.path)
    return None

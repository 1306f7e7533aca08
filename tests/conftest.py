# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duke.core.state import AppState
from duke.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Duke",
        log_level="WARNING",
        file_logging=False,
        data_dir=data_dir,
        tasks_path=data_dir / "duke.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState with an empty task list.

    NOTE: the real file-backed TaskStore is used here because what lands on
    disk after each command is part of what we want to test.
    """
    return AppState(settings=settings, task_store=TaskStore(settings.tasks_path))

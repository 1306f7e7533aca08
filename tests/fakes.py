# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from duke.errors import PersistenceError
from duke.tasks.task_models import Task
from duke.tasks.task_store import TaskStore


class FailingTaskStore(TaskStore):
    """
    TaskStore whose save() always fails, as if the disk were read-only.

    Captures save attempts for assertions.
    """

    def __init__(self, path: str | Path = "unused/duke.txt") -> None:
        super().__init__(path)
        self.save_calls = 0

    def save(self, tasks: Iterable[Task]) -> None:
        self.save_calls += 1
        raise PersistenceError("Permission denied: 'data/duke.txt'")

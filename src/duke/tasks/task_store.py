# src/duke/tasks/task_store.py

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..errors import PersistenceError, TaskDecodeError
from .task_codec import decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat text file task store.

    The file holds one encoded task per line (see task_codec). It is read once
    at startup and fully rewritten after every change; each call opens and
    closes the file on its own.
    """

    def __init__(self, path: str | Path = "data/duke.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read every saved task, in file order.

        Raises PersistenceError when the file (or its directory) is missing or
        unreadable. Lines that cannot be decoded are skipped with a warning.
        """
        try:
            with self._path.open("r", encoding="utf-8") as f:
                lines = [line.rstrip("\r") for line in f.read().split("\n")]
        except FileNotFoundError as e:
            raise PersistenceError(f"I couldn't find any saved tasks at {self._path}.") from e
        except (OSError, UnicodeDecodeError) as e:
            backup = self._backup_unreadable()
            if backup is not None:
                hint = f"I kept a copy of it at {backup}."
            else:
                hint = "It will be replaced when you change your list."
            raise PersistenceError(f"I couldn't read your saved tasks at {self._path}: {e}\n{hint}") from e

        tasks: list[Task] = []
        skipped = 0
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except TaskDecodeError as e:
                skipped += 1
                logger.warning("Skipping %s:%d: %s", self._path, lineno, e)

        logger.info("TaskStore loaded path=%s total=%d skipped=%d", self._path, len(tasks), skipped)
        return tasks

    def _backup_unreadable(self) -> Path | None:
        """Copy an unreadable task file aside so the next save cannot destroy it."""
        backup = self._path.with_name(self._path.name + ".bak")
        try:
            shutil.copyfile(self._path, backup)
        except OSError:
            logger.warning("Could not back up unreadable task file %s", self._path, exc_info=True)
            return None
        logger.warning("Unreadable task file %s copied to %s", self._path, backup)
        return backup

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrite the whole file with the given tasks, in order."""
        data = "".join(encode_task(t) + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                f.write(data)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise PersistenceError(str(e)) from e
        logger.debug("TaskStore saved path=%s bytes=%d", self._path, len(data))

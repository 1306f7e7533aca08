# src/duke/errors.py

"""
Error kinds raised by the interpreter and the task store.

Every DukeError carries the exact text shown to the user; callers render
str(exc) and carry on with the next command.
"""

from __future__ import annotations


class DukeError(Exception):
    """Base class for all recoverable Duke errors."""


class ValidationError(DukeError):
    """Command text does not have one of the recognised shapes."""


class TaskIndexError(DukeError):
    """Index token is not a number or does not point at an existing task."""


class PersistenceError(DukeError):
    """Saved tasks could not be read or written."""


class TaskDecodeError(PersistenceError):
    """A persisted line could not be turned back into a task."""

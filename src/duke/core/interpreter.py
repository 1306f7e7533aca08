# src/duke/core/interpreter.py

"""
Command interpreter.

Turns one stripped input line into a reply:
- validate() checks the line against the registered command shapes,
- process() runs an already validated line against AppState.tasks,
- handle_line() does both and renders any DukeError as an error reply.

Validation is a length/substring heuristic. A line that slips through it
and is still malformed fails inside process() with a DukeError.
"""

from __future__ import annotations

import logging
import re

from ..cli.commands import Command, CommandRegistry
from ..errors import DukeError, PersistenceError, TaskIndexError, ValidationError
from ..presentation import format_count, format_error, format_task_list, frame
from ..tasks.task_models import FIELD_SEPARATOR, Task
from .state import AppState

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "You have no tasks now. Hooray!"
TASK_NOT_FOUND_MESSAGE = "I couldn't find the task you requested!"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")

registry = CommandRegistry()


def get_task_index(state: AppState, token: str) -> int:
    """
    Convert a one-indexed task number typed by the user into a list index.

    Raises TaskIndexError when the token is not an integer or does not
    point at an existing task.
    """
    if not _INDEX_RE.fullmatch(token):
        raise TaskIndexError(TASK_NOT_FOUND_MESSAGE)
    number = int(token)
    if not 1 <= number <= len(state.tasks):
        raise TaskIndexError(TASK_NOT_FOUND_MESSAGE)
    return number - 1


def save_tasks(state: AppState) -> str | None:
    """Flush the task list. Returns a warning text if saving failed, else None."""
    try:
        state.task_store.save(state.tasks)
    except PersistenceError as e:
        logger.warning("Save failed, change kept in memory only: %s", e)
        return (
            "Oops! I encountered an error when saving your tasks.\n"
            f"    {e}\n"
            "If you say bye now, you may not be able to access this\n"
            " list in future."
        )
    return None


def _with_save(state: AppState, reply: str) -> str:
    warning = save_tasks(state)
    if warning is None:
        return reply
    return f"{reply}\n\n{warning}"


# ---- handlers ----


def cmd_list(state: AppState, line: str) -> str:
    if not state.tasks:
        return EMPTY_LIST_MESSAGE
    return format_task_list(state.tasks)


def cmd_done(state: AppState, line: str) -> str:
    task = state.tasks[get_task_index(state, line[5:])]
    task.mark_as_done()
    logger.debug("Marked done: %s", task)
    return _with_save(state, f"Nice! I've marked this task as done:\n  {task}")


def cmd_undo(state: AppState, line: str) -> str:
    task = state.tasks[get_task_index(state, line[5:])]
    task.mark_as_undone()
    logger.debug("Marked undone: %s", task)
    return _with_save(state, f"Oh dear. I've marked this task as undone:\n  {task}")


def cmd_delete(state: AppState, line: str) -> str:
    task = state.tasks.pop(get_task_index(state, line[7:]))
    logger.debug("Deleted: %s", task)
    return _with_save(
        state,
        f"Noted. I've removed this task:\n  {task}\n{format_count(len(state.tasks))}",
    )


def _split_details(body: str, separator: str) -> tuple[str, str]:
    parts = body.split(separator)
    if len(parts) < 2:
        raise ValidationError("I couldn't work out the details of that task.")
    if FIELD_SEPARATOR in parts[1]:
        raise ValidationError(f"Sorry, the time can't contain \"{FIELD_SEPARATOR.strip()}\".")
    return parts[0], parts[1]


def parse_new_task(line: str) -> Task:
    """Build a task from a new-task line; unknown keywords become a todo of the whole line."""
    if line.startswith("todo"):
        return Task.todo(line[5:])
    if line.startswith("event"):
        description, at = _split_details(line[6:], " /at ")
        return Task.event(description, at)
    if line.startswith("deadline"):
        description, by = _split_details(line[9:], " /by ")
        return Task.deadline(description, by)
    return Task.todo(line)


def cmd_add(state: AppState, line: str) -> str:
    task = parse_new_task(line)
    state.tasks.append(task)
    logger.debug("Added: %s", task)
    return _with_save(
        state,
        f"Got it. I've added this task:\n  {task}\n{format_count(len(state.tasks))}",
    )


def cmd_help(state: AppState, line: str) -> str:
    return registry.build_help()


registry.register(
    Command(
        "done",
        cmd_done,
        help_text="Mark task N as done.",
        usage="done N",
        min_length=6,
        missing_message="I couldn't find a task to look up.",
    )
)
registry.register(
    Command(
        "undo",
        cmd_undo,
        help_text="Mark task N as not done.",
        usage="undo N",
        min_length=6,
        missing_message="I couldn't find a task to look up.",
    )
)
registry.register(
    Command(
        "delete",
        cmd_delete,
        help_text="Remove task N.",
        usage="delete N",
        min_length=8,
        missing_message="I couldn't find a task to delete.",
    )
)
registry.register(
    Command(
        "todo",
        cmd_add,
        help_text="Add a todo.",
        usage="todo DESCRIPTION",
        min_length=6,
        missing_message="I can't see the description of your todo.",
    )
)
registry.register(
    Command(
        "event",
        cmd_add,
        help_text="Add an event.",
        usage="event DESCRIPTION /at TIME",
        min_length=7,
        missing_message="I need to know the event description.",
        separator=" /at ",
        missing_separator_message="I also need to know when your event is.",
    )
)
registry.register(
    Command(
        "deadline",
        cmd_add,
        help_text="Add a deadline.",
        usage="deadline DESCRIPTION /by TIME",
        min_length=10,
        missing_message="I didn't catch what you need to do.",
        separator=" /by ",
        missing_separator_message="what's the deadline for this?",
    )
)
registry.register(Command("list", cmd_list, help_text="Show all tasks.", usage="list", exact=True))
registry.register(Command("help", cmd_help, help_text="Show this help.", usage="help", exact=True))


# ---- entry points ----


def validate(line: str) -> None:
    """Raise ValidationError unless the line has one of the recognised shapes."""
    registry.validate(line)


def process(state: AppState, line: str) -> str:
    """Run an already validated line and return the reply text (unframed)."""
    command = registry.match(line)
    handler = command.handler if command is not None else cmd_add
    return handler(state, line)


def handle_line(state: AppState, line: str) -> str:
    """Validate and process one line, returning the framed reply. Never raises DukeError."""
    try:
        validate(line)
        return frame(process(state, line))
    except DukeError as e:
        logger.info("Command rejected (%s): %s", type(e).__name__, e)
        return format_error(str(e))

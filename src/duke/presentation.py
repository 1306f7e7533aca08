# src/duke/presentation.py

"""Text formatting for everything Duke prints: banner, framed replies, task lists."""

from __future__ import annotations

from collections.abc import Sequence

from .tasks.task_models import Task

INDENT = "    "
DIVIDER = INDENT + "_" * 60

LOGO = (
    " ____        _        \n"
    "|  _ \\ _   _| | _____ \n"
    "| | | | | | | |/ / _ \\\n"
    "| |_| | |_| |   <  __/\n"
    "|____/ \\__,_|_|\\_\\___|\n"
)


def frame(text: str) -> str:
    """Indent every line of text and put it between two divider lines."""
    body = "\n".join(f"{INDENT} {line}" if line else "" for line in text.split("\n"))
    return f"{DIVIDER}\n{body}\n{DIVIDER}\n"


def format_error(message: str) -> str:
    return frame(f"OOPS!!! {message}")


def format_task_list(tasks: Sequence[Task]) -> str:
    lines = ["Here are the tasks in your list:"]
    lines.extend(f"{i}.{task}" for i, task in enumerate(tasks, start=1))
    return "\n".join(lines)


def format_count(n: int) -> str:
    return f"Now you have {n} tasks in the list."


def welcome_message(app_name: str = "Duke") -> str:
    return LOGO + frame(f"Hello! I'm {app_name}\nWhat can I do for you?")


def farewell_message() -> str:
    return frame("Bye. Hope to see you again soon!")

# src/duke/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import ValidationError

if TYPE_CHECKING:
    from ..core.state import AppState

CommandHandler = Callable[["AppState", str], str]

UNRECOGNIZED_MESSAGE = "I don't know what that means... :("

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    """
    One recognised command shape.

    Prefix commands match any line starting with `keyword` (case-sensitive) and
    are checked with plain length/substring tests. Exact commands match the
    whole line case-insensitively but only validate when typed in lower case.
    """

    keyword: str
    handler: CommandHandler
    help_text: str
    usage: str
    exact: bool = False
    min_length: int = 0
    missing_message: str = ""
    separator: str | None = None
    missing_separator_message: str = ""

    def matches(self, line: str) -> bool:
        if self.exact:
            return line.lower() == self.keyword
        return line.startswith(self.keyword)

    def description_of(self, line: str) -> str:
        """Text between the keyword and the first whole-word separator (or the end of the line)."""
        body = line[len(self.keyword) + 1 :]
        if self.separator:
            word = self.separator.strip()
            if body == word or body.startswith(word + " "):
                return ""
            body = body.split(self.separator, 1)[0]
        return body

    def check(self, line: str) -> None:
        if self.exact:
            if line != self.keyword:
                raise ValidationError(UNRECOGNIZED_MESSAGE)
            return

        if len(line) < self.min_length:
            raise ValidationError(self.missing_message)
        if self.separator is not None:
            if not self.description_of(line).strip():
                raise ValidationError(self.missing_message)
            if self.separator not in line:
                raise ValidationError(self.missing_separator_message)


class CommandRegistry:
    """Keyword command registry; lookup follows registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        if command.keyword in self._commands:
            logger.debug("Replacing command %r", command.keyword)
        self._commands[command.keyword] = command

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def match(self, line: str) -> Command | None:
        """Return the first command whose shape the line starts with, or None."""
        for command in self._commands.values():
            if command.matches(line):
                return command
        return None

    def validate(self, line: str) -> Command:
        command = self.match(line)
        if command is None:
            raise ValidationError(UNRECOGNIZED_MESSAGE)
        command.check(line)
        return command

    def build_help(self) -> str:
        width = max((len(c.usage) for c in self), default=0)
        lines = ["Here's what I understand:"]
        for command in self:
            lines.append(f"  {command.usage.ljust(width)}  {command.help_text}")
        lines.append(f"  {'bye'.ljust(width)}  Save and leave (also: exit).")
        return "\n".join(lines)

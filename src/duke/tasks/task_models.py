# src/duke/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DONE_ICON = "+"
UNDONE_ICON = " "

# Field separator of the task file; time text may not contain it.
FIELD_SEPARATOR = " | "


class TaskKind(StrEnum):
    """
    One-letter type tag of a task.

    The value is both the persisted tag and the display tag, so it must not change.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def extra_label(self) -> str | None:
        """Word shown before the time text ("by"/"at"), None for kinds without one."""
        match self:
            case TaskKind.TODO:
                return None
            case TaskKind.DEADLINE:
                return "by"
            case TaskKind.EVENT:
                return "at"


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    is_done: bool = False
    # Deadline: "by" text, Event: "at" text, Todo: None.
    extra: str | None = None

    def __post_init__(self) -> None:
        if self.kind.extra_label is None:
            if self.extra is not None:
                raise ValueError(f"{self.kind.name.lower()} tasks carry no time text")
        elif self.extra is None:
            raise ValueError(f"{self.kind.name.lower()} tasks need a time text")
        elif FIELD_SEPARATOR in self.extra:
            raise ValueError(f"time text may not contain {FIELD_SEPARATOR!r}")

    @classmethod
    def todo(cls, description: str, is_done: bool = False) -> Task:
        return cls(TaskKind.TODO, description, is_done)

    @classmethod
    def deadline(cls, description: str, by: str, is_done: bool = False) -> Task:
        return cls(TaskKind.DEADLINE, description, is_done, by)

    @classmethod
    def event(cls, description: str, at: str, is_done: bool = False) -> Task:
        return cls(TaskKind.EVENT, description, is_done, at)

    @property
    def status_icon(self) -> str:
        return DONE_ICON if self.is_done else UNDONE_ICON

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_undone(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        text = f"[{self.kind.value}][{self.status_icon}] {self.description}"
        label = self.kind.extra_label
        if label is not None:
            text += f" ({label}: {self.extra})"
        return text


def status_from_icon(icon: str) -> bool:
    """Map a status icon back to the done flag. Raises ValueError for anything else."""
    if icon == DONE_ICON:
        return True
    if icon == UNDONE_ICON:
        return False
    raise ValueError(f"unknown status icon: {icon!r}")

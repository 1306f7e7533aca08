# src/duke/tasks/task_codec.py

"""
Line codec for the task file.

Each task is one line:

    <KIND> | <STATUS> | <description>[ | <extra>]

KIND is T/D/E, STATUS is "+" (done) or " " (not done), extra is only present
for deadlines and events.
"""

from __future__ import annotations

from ..errors import TaskDecodeError
from .task_models import FIELD_SEPARATOR, Task, TaskKind, status_from_icon


def encode_task(task: Task) -> str:
    fields = [task.kind.value, task.status_icon, task.description]
    match task.kind:
        case TaskKind.TODO:
            pass
        case TaskKind.DEADLINE | TaskKind.EVENT:
            fields.append(task.extra or "")
    return FIELD_SEPARATOR.join(fields)


def decode_task(line: str) -> Task:
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        raise TaskDecodeError(f"Not enough fields in saved task: {line!r}")

    tag, icon, rest = parts[0], parts[1], parts[2:]

    try:
        kind = TaskKind(tag)
    except ValueError:
        raise TaskDecodeError(f"Unknown task type {tag!r} in saved task: {line!r}") from None

    try:
        is_done = status_from_icon(icon)
    except ValueError:
        raise TaskDecodeError(f"Unknown status {icon!r} in saved task: {line!r}") from None

    match kind:
        case TaskKind.TODO:
            return Task.todo(FIELD_SEPARATOR.join(rest), is_done)
        case TaskKind.DEADLINE | TaskKind.EVENT:
            if len(rest) < 2:
                raise TaskDecodeError(f"Missing time in saved task: {line!r}")
            description = FIELD_SEPARATOR.join(rest[:-1])
            return Task(kind, description, is_done, rest[-1])

# src/duke/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read global config.
    settings: object

    task_store: TaskStore

    # Ordered task list: insertion order = display order = file order.
    tasks: list[Task] = field(default_factory=list)

# src/todo_home/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..render.list_renderer import ListRenderer
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskStore
    renderer: ListRenderer

    # Teardown hooks registered during bootstrap (e.g. autosave unsubscribe).
    cleanups: list[Callable[[], None]] = field(default_factory=list)

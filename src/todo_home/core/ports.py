# src/todo_home/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used between the store, the renderer and the hosts.

The renderer depends on these Protocols instead of the concrete TaskStore,
and the store depends on TaskPersistence instead of the JSON file class.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from ..tasks.task_models import Task
from ..tasks.task_persistence import LoadedTasks

Snapshot = tuple[Task, ...]
SnapshotListener = Callable[[Snapshot], None]
Emitter = Callable[[str], None]


class TaskPersistence(Protocol):
    """Durable backend for the whole collection (see tasks.task_persistence)."""

    def load(self) -> LoadedTasks: ...
    def save(self, tasks: Sequence[Task], next_id: int) -> None: ...


class TaskRepo(Protocol):
    """What the list renderer needs from a task store."""

    def add(self, title: str) -> int: ...
    def toggle(self, task_id: int) -> Task: ...
    def remove(self, task_id: int) -> Task: ...
    def list(self) -> Snapshot: ...
    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]: ...

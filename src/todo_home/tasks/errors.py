# src/todo_home/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for every error raised by the task subsystem."""


class ValidationError(TodoError, ValueError):
    """A task title was empty or whitespace-only."""


class NotFoundError(TodoError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task not found: id={task_id}")
        self.task_id = task_id


class PersistenceError(TodoError):
    """Reading or writing the task file failed."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class StoreNotReadyError(TodoError):
    """A mutation arrived before the startup load finished."""


class StoreStateError(TodoError):
    """load() was requested on a store that is already in use."""

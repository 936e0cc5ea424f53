# src/todo_home/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any


class TaskState(StrEnum):
    """
    Observable task state.

    Notes:
    - "deleted" is terminal and never stored: a removed task is simply absent.
    """

    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def from_flag(cls, completed: bool) -> TaskState:
        return cls.COMPLETED if completed else cls.ACTIVE


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    completed: bool = False
    created_at: float = 0.0

    @property
    def state(self) -> TaskState:
        return TaskState.from_flag(self.completed)

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)

    def to_record(self) -> dict[str, Any]:
        """Serialized form used by the task file (camelCase createdAt on disk)."""
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, raw: dict[str, Any]) -> Task | None:
        """
        Build a Task from a stored record.

        Returns None for records that cannot be trusted (missing/invalid id,
        empty title). bool is an int subclass, so it is checked explicitly.
        """
        tid = raw.get("id")
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
            return None

        title = raw.get("title")
        if not isinstance(title, str) or not title.strip():
            return None

        created_raw = raw.get("createdAt", raw.get("created_at", 0.0))
        try:
            created_at = float(created_raw or 0.0)
        except (TypeError, ValueError, OverflowError):
            created_at = 0.0

        return cls(
            id=tid,
            title=title.strip(),
            completed=raw.get("completed") is True,
            created_at=created_at,
        )

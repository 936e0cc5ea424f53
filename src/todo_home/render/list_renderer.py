# src/todo_home/render/list_renderer.py

"""
List renderer: task snapshot -> rows, user gestures -> store calls.

The renderer holds no authoritative state. Rows are always rebuilt from the
snapshot delivered by the store; the only thing it keeps on its own is the
draft text of the "add" input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.ports import Emitter, Snapshot, TaskRepo
from ..tasks.errors import NotFoundError, StoreNotReadyError
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

EMPTY_TEXT = "(no tasks yet)"


@dataclass(frozen=True, slots=True)
class Row:
    task_id: int
    position: int
    title: str
    completed: bool

    @property
    def indicator(self) -> str:
        return "[x]" if self.completed else "[ ]"

    def as_line(self) -> str:
        return f"{self.indicator} {self.position}. {self.title}  (#{self.task_id})"


class ListRenderer:
    def __init__(self, store: TaskRepo, *, emit: Emitter | None = None) -> None:
        self._store = store
        self._emit = emit
        self._rows: tuple[Row, ...] = ()
        self._unsubscribe: Callable[[], None] | None = None
        self.draft = ""

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    # ---- lifecycle ----

    def mount(self) -> tuple[Row, ...]:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._on_change)
            logger.debug("ListRenderer mounted")
        self._apply(self._store.list())
        return self._rows

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("ListRenderer unmounted")

    def _on_change(self, snapshot: Snapshot) -> None:
        self._apply(snapshot)

    def _apply(self, snapshot: Sequence[Task]) -> None:
        self._rows = self.render(snapshot)
        if self._emit is not None:
            self._emit(self.render_text())

    # ---- pure rendering ----

    @staticmethod
    def render(snapshot: Sequence[Task]) -> tuple[Row, ...]:
        return tuple(
            Row(task_id=t.id, position=i, title=t.title, completed=t.completed)
            for i, t in enumerate(snapshot, start=1)
        )

    def render_text(self) -> str:
        if not self._rows:
            return EMPTY_TEXT
        return "\n".join(r.as_line() for r in self._rows)

    def row_for_position(self, position: int) -> Row | None:
        if 1 <= position <= len(self._rows):
            return self._rows[position - 1]
        return None

    # ---- gestures ----

    def add_gesture(self, text: str) -> int | None:
        clean = (text or "").strip()
        if not clean:
            return None
        try:
            return self._store.add(clean)
        except StoreNotReadyError:
            logger.info("Add ignored: task list is not loaded yet.")
            return None

    def toggle_gesture(self, task_id: int) -> bool:
        try:
            self._store.toggle(task_id)
        except NotFoundError:
            logger.info("Toggle ignored: task id=%s no longer exists.", task_id)
            return False
        except StoreNotReadyError:
            logger.info("Toggle ignored: task list is not loaded yet.")
            return False
        return True

    def remove_gesture(self, task_id: int) -> bool:
        try:
            self._store.remove(task_id)
        except NotFoundError:
            logger.info("Remove ignored: task id=%s no longer exists.", task_id)
            return False
        except StoreNotReadyError:
            logger.info("Remove ignored: task list is not loaded yet.")
            return False
        return True

    def set_draft(self, text: str) -> None:
        self.draft = text

    def submit_draft(self) -> int | None:
        """Add the current draft as a task and clear the input."""
        text, self.draft = self.draft, ""
        return self.add_gesture(text)

# src/todo_home/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..core.ports import Snapshot, SnapshotListener, TaskPersistence
from .errors import (
    NotFoundError,
    PersistenceError,
    StoreNotReadyError,
    StoreStateError,
    ValidationError,
)
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory owner of the task collection.

    Ordering:
    - tasks keep insertion order; toggle keeps the position, remove closes the gap

    Ids:
    - handed out by a monotonic counter and never reused, also across save/load

    Notifications:
    - every successful mutation publishes the new snapshot to all subscribers,
      synchronously and in subscription order, before the call returns
    - failed mutations publish nothing

    Persistence:
    - optional; with a backend attached the store rejects mutations
      (StoreNotReadyError) until load() has run once at startup
    """

    def __init__(
        self,
        persistence: TaskPersistence | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._listeners: list[SnapshotListener] = []
        self._persistence = persistence
        self._clock = clock
        self._loaded = False
        self._ready = persistence is None

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def persistent(self) -> bool:
        return self._persistence is not None

    # ---- subscriptions ----

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: SnapshotListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _publish(self) -> None:
        snapshot = self.list()
        # Copy: a listener may unsubscribe itself while we iterate.
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener %r failed", listener)

    # ---- reads ----

    def list(self) -> Snapshot:
        return tuple(self._tasks.values())

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def count(self) -> int:
        return len(self._tasks)

    # ---- mutations ----

    def _check_ready(self) -> None:
        if not self._ready:
            raise StoreNotReadyError("task store is still waiting for its startup load")

    def add(self, title: str) -> int:
        self._check_ready()
        clean = (title or "").strip()
        if not clean:
            raise ValidationError("title is required")

        task_id = self._next_id
        self._next_id += 1
        self._tasks[task_id] = Task(id=task_id, title=clean, created_at=self._clock())
        logger.debug("Task added id=%s title=%r", task_id, clean)

        self._publish()
        return task_id

    def toggle(self, task_id: int) -> Task:
        self._check_ready()
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)

        # Reassigning an existing key keeps its position in the dict.
        updated = task.toggled()
        self._tasks[task_id] = updated
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)

        self._publish()
        return updated

    def remove(self, task_id: int) -> Task:
        self._check_ready()
        task = self._tasks.pop(task_id, None)
        if task is None:
            raise NotFoundError(task_id)
        logger.debug("Task removed id=%s", task_id)

        self._publish()
        return task

    # ---- persistence ----

    def load(self) -> Snapshot:
        """
        Populate the store from the backend. Runs once, before any mutation.

        A missing or corrupt file yields an empty collection (logged, not raised).
        """
        if self._persistence is None:
            raise StoreStateError("no persistence backend attached")
        if self._loaded:
            raise StoreStateError("load() is only allowed once")

        try:
            loaded = self._persistence.load()
        except PersistenceError:
            logger.exception("Failed to load tasks; starting with an empty list.")
            tasks: tuple[Task, ...] = ()
            next_id = 1
        else:
            tasks = loaded.tasks
            next_id = loaded.next_id

        self._tasks = {t.id: t for t in tasks}
        self._next_id = max([1, next_id, *(tid + 1 for tid in self._tasks)])
        self._loaded = True
        self._ready = True
        logger.info("TaskStore ready total=%s next_id=%s", len(self._tasks), self._next_id)

        self._publish()
        return self.list()

    def save(self) -> None:
        """Write the whole collection. Raises PersistenceError; memory state stays valid."""
        if self._persistence is None:
            raise StoreStateError("no persistence backend attached")
        if not self._ready:
            # The file must be read before it is ever written.
            raise StoreNotReadyError("refusing to save before the startup load")
        self._persistence.save(self.list(), self._next_id)

# src/todo_home/tasks/task_persistence.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import PersistenceError
from .task_models import Task

logger = logging.getLogger(__name__)

FILE_VERSION = 1


@dataclass(frozen=True, slots=True)
class LoadedTasks:
    tasks: tuple[Task, ...] = ()
    next_id: int = 1


class JsonTaskFile:
    """
    JSON file holding the whole task collection.

    Layout:
        {"version": 1, "next_id": N, "tasks": [{id, title, completed, createdAt}, ...]}

    A bare list of task records is accepted on load as well.
    Writes go to a temp file first and are moved into place with os.replace.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadedTasks:
        """
        Read the file.

        Missing file -> empty result.
        Unreadable or malformed file -> PersistenceError.
        Individual bad records are skipped.
        """
        if not self._path.exists():
            logger.info("Task file %s does not exist yet, starting empty.", self._path)
            return LoadedTasks()

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError.
            raise PersistenceError(f"cannot read task file: {e}", self._path) from e

        if isinstance(data, list):
            records: Any = data
            next_hint = 1
        elif isinstance(data, dict):
            records = data.get("tasks", [])
            next_hint = data.get("next_id", 1)
        else:
            raise PersistenceError("task file is neither an object nor a list", self._path)

        if not isinstance(records, list):
            raise PersistenceError("task file 'tasks' entry is not a list", self._path)

        tasks: list[Task] = []
        seen: set[int] = set()
        for raw in records:
            task = Task.from_record(raw) if isinstance(raw, dict) else None
            if task is None:
                logger.warning("Skipping invalid task record in %s: %r", self._path, raw)
                continue
            if task.id in seen:
                logger.warning("Skipping duplicate task id=%s in %s", task.id, self._path)
                continue
            seen.add(task.id)
            tasks.append(task)

        if not isinstance(next_hint, int) or isinstance(next_hint, bool) or next_hint < 1:
            next_hint = 1
        next_id = max([next_hint, *(t.id + 1 for t in tasks)])

        logger.info("Loaded %d tasks from %s (next_id=%d)", len(tasks), self._path, next_id)
        return LoadedTasks(tasks=tuple(tasks), next_id=next_id)

    def save(self, tasks: Sequence[Task], next_id: int) -> None:
        payload = {
            "version": FILE_VERSION,
            "next_id": int(next_id),
            "tasks": [t.to_record() for t in tasks],
        }
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise PersistenceError(f"cannot write task file: {e}", self._path) from e

        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

# src/todo_home/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task file, the store and the list renderer into AppState,
- runs the one-time startup load and hooks up autosave.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Emitter, Snapshot
from ..core.state import AppState
from ..render.list_renderer import ListRenderer
from ..tasks.errors import PersistenceError
from ..tasks.task_persistence import JsonTaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, emit: Emitter | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    The store is loaded here, before the renderer is mounted and before any
    gesture can reach it. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    persistence_enabled = bool(getattr(settings, "persistence_enabled", False))
    if persistence_enabled:
        _ensure_local_dirs(settings)
        store = TaskStore(JsonTaskFile(settings.tasks_path))
    else:
        store = TaskStore()

    renderer = ListRenderer(store, emit=emit)
    state = AppState(settings=settings, task_store=store, renderer=renderer)

    if persistence_enabled:
        store.load()
        if getattr(settings, "autosave", False):
            state.cleanups.append(store.subscribe(_autosave_listener(store)))

    return state


def _autosave_listener(store: TaskStore):
    def _on_change(_snapshot: Snapshot) -> None:
        try:
            store.save()
        except PersistenceError:
            logger.exception("Autosave failed; keeping in-memory tasks.")

    return _on_change


def save_tasks(state: AppState) -> bool:
    """Best-effort save used by /save and on shutdown. Returns True on success."""
    if not state.task_store.persistent:
        return False
    try:
        state.task_store.save()
    except PersistenceError:
        logger.exception("Failed to save tasks.")
        return False
    logger.info("Saved %d tasks.", state.task_store.count())
    return True


def shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.renderer.unmount()
    except Exception:
        logger.debug("Renderer unmount failed.", exc_info=True)

    for cleanup in reversed(state.cleanups):
        try:
            cleanup()
        except Exception:
            logger.debug("Cleanup hook failed.", exc_info=True)
    state.cleanups.clear()

    save_tasks(state)

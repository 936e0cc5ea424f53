# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_home.core.state import AppState
from todo_home.render.list_renderer import ListRenderer
from todo_home.tasks.task_persistence import JsonTaskFile
from todo_home.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-home-test",
        log_level="DEBUG",
        page_title="Хатняя старонка",
        page_heading="Хата",
        page_text="Гэта спiс.",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.json",
        persistence_enabled=False,
        autosave=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    """Memory-only store: ready immediately, no load step."""
    return TaskStore(clock=clock)


@pytest.fixture()
def task_file(tmp_path: Path) -> JsonTaskFile:
    return JsonTaskFile(tmp_path / "tasks.json")


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, renderer=ListRenderer(store))

# tests/test_task_persistence.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_home.tasks.errors import PersistenceError
from todo_home.tasks.task_models import Task
from todo_home.tasks.task_persistence import JsonTaskFile
from todo_home.tasks.task_store import TaskStore


def test_missing_file_loads_empty(task_file: JsonTaskFile) -> None:
    loaded = task_file.load()
    assert loaded.tasks == ()
    assert loaded.next_id == 1


def test_save_writes_documented_layout(task_file: JsonTaskFile) -> None:
    tasks = [
        Task(id=1, title="Buy milk", completed=True, created_at=10.5),
        Task(id=4, title="Walk dog", completed=False, created_at=11.0),
    ]
    task_file.save(tasks, next_id=5)

    data = json.loads(task_file.path.read_text("utf-8"))
    assert data["version"] == 1
    assert data["next_id"] == 5
    assert data["tasks"] == [
        {"id": 1, "title": "Buy milk", "completed": True, "createdAt": 10.5},
        {"id": 4, "title": "Walk dog", "completed": False, "createdAt": 11.0},
    ]
    assert not task_file.path.with_suffix(".json.tmp").exists()


def test_round_trip_through_store(task_file: JsonTaskFile, clock) -> None:
    store = TaskStore(task_file, clock=clock)
    store.load()
    milk = store.add("Buy milk")
    store.add("Walk dog")
    store.add("Хлеб")
    store.toggle(milk)
    store.save()

    fresh = TaskStore(JsonTaskFile(task_file.path), clock=clock)
    fresh.load()

    assert fresh.list() == store.list()


def test_bare_list_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps([{"id": 2, "title": "a", "completed": False, "createdAt": 1}]), "utf-8"
    )

    loaded = JsonTaskFile(path).load()

    assert loaded.tasks == (Task(id=2, title="a", completed=False, created_at=1.0),)
    assert loaded.next_id == 3


def test_bad_records_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    records = [
        {"id": 1, "title": "ok"},
        {"id": 1, "title": "duplicate id"},
        {"id": "x", "title": "string id"},
        {"id": True, "title": "bool id"},
        {"id": 3, "title": "   "},
        {"title": "no id"},
        "not a record",
        {"id": 5, "title": " trimmed ", "completed": True},
        {"id": 6, "title": "string flag", "completed": "false"},
        {"id": 7, "title": "int flag", "completed": 1},
    ]
    path.write_text(json.dumps({"version": 1, "next_id": 2, "tasks": records}), "utf-8")

    loaded = JsonTaskFile(path).load()

    assert [(t.id, t.title, t.completed) for t in loaded.tasks] == [
        (1, "ok", False),
        (5, "trimmed", True),
        (6, "string flag", False),
        (7, "int flag", False),
    ]
    assert loaded.next_id == 8


def test_next_id_hint_is_respected(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"next_id": 40, "tasks": [{"id": 2, "title": "a"}]}), "utf-8")

    assert JsonTaskFile(path).load().next_id == 40


@pytest.mark.parametrize("content", ["{not json", "42", '"text"', '{"tasks": {"id": 1}}'])
def test_corrupt_file_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")

    with pytest.raises(PersistenceError) as exc:
        JsonTaskFile(path).load()
    assert exc.value.path == path


def test_corrupt_file_gives_empty_store(tmp_path: Path, clock) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{not json", "utf-8")

    store = TaskStore(JsonTaskFile(path), clock=clock)

    assert store.load() == ()
    assert store.add("fresh start") == 1


def test_save_failure_raises_persistence_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", "utf-8")
    task_file = JsonTaskFile(blocker / "tasks.json")

    with pytest.raises(PersistenceError):
        task_file.save([Task(id=1, title="a")], next_id=2)


@pytest.mark.parametrize("hint", [0, -5, "7", None])
def test_unusable_next_id_hint_falls_back_to_one(tmp_path: Path, clock, hint) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"next_id": hint, "tasks": []}), "utf-8")

    assert JsonTaskFile(path).load().next_id == 1

    store = TaskStore(JsonTaskFile(path), clock=clock)
    store.load()
    assert store.add("Buy milk") == 1
    store.save()

    fresh = TaskStore(JsonTaskFile(path), clock=clock)
    fresh.load()
    assert fresh.list() == store.list()


def test_deeply_nested_file_gives_empty_store(tmp_path: Path, clock) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("[" * 100000 + "]" * 100000, "utf-8")

    with pytest.raises(PersistenceError):
        JsonTaskFile(path).load()

    store = TaskStore(JsonTaskFile(path), clock=clock)
    assert store.load() == ()
    assert store.add("fresh start") == 1


def test_huge_created_at_is_reset(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text('[{"id": 1, "title": "a", "createdAt": 1' + "0" * 400 + "}]", "utf-8")

    loaded = JsonTaskFile(path).load()

    assert [(t.id, t.created_at) for t in loaded.tasks] == [(1, 0.0)]

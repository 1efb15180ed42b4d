# tests/test_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from storage import Storage, StorageError
from task_list import TaskList


def test_missing_file_loads_empty(tasks_file: Path) -> None:
    tl = Storage.load(tasks_file)
    assert len(tl) == 0
    assert not tasks_file.exists()


def test_round_trip(tasks_file: Path, three_tasks: TaskList) -> None:
    three_tasks.mark_done(2)
    three_tasks.delete(1)
    three_tasks.add("")
    Storage.save(three_tasks, tasks_file)
    loaded = Storage.load(tasks_file)
    assert list(loaded) == list(three_tasks)


def test_save_is_pretty_printed(tasks_file: Path) -> None:
    tl = TaskList()
    tl.add("write spec")
    Storage.save(tl, tasks_file)
    text = tasks_file.read_text(encoding="utf-8")
    assert text == json.dumps(
        {"todos": [{"id": 1, "description": "write spec", "done": False}]}, indent=4
    )


def test_save_overwrites(tasks_file: Path, three_tasks: TaskList) -> None:
    Storage.save(three_tasks, tasks_file)
    Storage.save(TaskList(), tasks_file)
    assert json.loads(tasks_file.read_text(encoding="utf-8")) == {"todos": []}


def test_save_creates_parent_dir(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "todos.json"
    Storage.save(TaskList(), target)
    assert target.exists()


def test_load_accepts_compact_json(tasks_file: Path) -> None:
    tasks_file.write_text('{"todos":[{"id":1,"description":"a","done":true}]}', encoding="utf-8")
    tl = Storage.load(tasks_file)
    assert tl.list() == "#1: a [Done]"


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "",
        "[]",
        '{"tasks": []}',
        '{"todos": [{"id": "x", "description": "a", "done": false}]}',
    ],
)
def test_load_rejects_bad_files(tasks_file: Path, content: str) -> None:
    tasks_file.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError) as excinfo:
        Storage.load(tasks_file)
    assert str(tasks_file) in str(excinfo.value)


def test_load_directory_is_read_error(tmp_path: Path) -> None:
    with pytest.raises(StorageError, match="Could not read"):
        Storage.load(tmp_path)


def test_save_into_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(StorageError, match="Could not write"):
        Storage.save(TaskList(), tmp_path)


def test_load_overlong_name_raises_storage_error(tmp_path: Path) -> None:
    with pytest.raises(StorageError, match="Could not read"):
        Storage.load(tmp_path / ("y" * 300))


def test_non_ascii_saved_as_utf8(tasks_file: Path) -> None:
    tl = TaskList()
    tl.add("café ☕")
    Storage.save(tl, tasks_file)
    assert "café ☕" in tasks_file.read_text(encoding="utf-8")
    assert Storage.load(tasks_file).list() == "#1: café ☕ [Not done]"

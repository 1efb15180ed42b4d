# tests/conftest.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

# theme decides on color at import time; keep rendered output plain
os.environ["NO_COLOR"] = "1"
os.environ.pop("FORCE_COLOR", None)

from config import get_settings  # noqa: E402
from task_list import TaskList  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from the caller's TODO_* settings."""
    for name in ("TODO_FILE", "TODO_LOG_LEVEL", "TODO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def three_tasks() -> TaskList:
    tl = TaskList()
    tl.add("Buy Milk")
    tl.add("write spec")
    tl.add("call mom")
    return tl

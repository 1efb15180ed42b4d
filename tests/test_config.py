# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from config import Settings
from logging_setup import level_from_name
from theme import parse_env_file


def test_settings_defaults() -> None:
    s = Settings.from_env()
    assert s.tasks_file == Path("todos.json")
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_FILE", str(tmp_path / "t.json"))
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", "  ")
    s = Settings.from_env()
    assert s.tasks_file == tmp_path / "t.json"
    assert s.log_level == "DEBUG"
    assert s.log_file is None


def test_level_from_name() -> None:
    assert level_from_name("info") == logging.INFO
    assert level_from_name("nonsense") == logging.WARNING


def test_parse_env_file_palette_only() -> None:
    text = "\n".join([
        "# comment",
        "TODO_DONE=#00ff00",
        "TODO_PENDING = 123abc",
        "TODO_PRIMARY=zzzzzz",
        "OTHER=#ffffff",
        "garbage",
    ])
    assert parse_env_file(text) == {"TODO_DONE": "#00ff00", "TODO_PENDING": "#123abc"}

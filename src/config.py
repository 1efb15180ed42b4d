"""Settings loaded from environment variables.

TODO_FILE       default tasks file (todos.json)
TODO_LOG_LEVEL  console log level (WARNING)
TODO_LOG_FILE   optional debug log file
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
from storage import DEFAULT_TASKS_FILE

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: str
    log_file: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_file=_env_path(_k("FILE"), Path(DEFAULT_TASKS_FILE)),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_file=_env_path(_k("LOG_FILE"), None),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

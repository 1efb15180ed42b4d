"""Persistence helpers (load/save) for the task list.

File layout: {"todos": [{"id": 1, "description": "...", "done": false}, ...]}
written pretty-printed; compact files are read just the same.
"""
import json
import logging
from pathlib import Path
from typing import Union
from task_list import TaskList

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = 'todos.json'

PathLike = Union[str, Path]


class StorageError(Exception):
    """Reading, parsing or writing the tasks file failed."""


class Storage:
    @staticmethod
    def load(filepath: PathLike) -> TaskList:
        """Load a task list from disk.

        Missing file -> empty list (first run). Any other read or parse
        failure raises StorageError.
        """
        path = Path(filepath)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("No tasks file at %s; starting empty", path)
            return TaskList()
        except OSError as exc:
            raise StorageError(f"Could not read {path}: {exc}") from exc
        except ValueError as exc:
            raise StorageError(f"Could not parse {path}: {exc}") from exc
        try:
            task_list = TaskList.from_dict(data)
        except ValueError as exc:
            raise StorageError(f"Invalid tasks file {path}: {exc}") from exc
        logger.debug("Loaded %d tasks from %s", len(task_list), path)
        return task_list

    @staticmethod
    def save(task_list: TaskList, filepath: PathLike) -> None:
        """Persist the list to disk (pretty-printed), replacing the file."""
        path = Path(filepath)
        try:
            data = json.dumps(task_list.to_dict(), indent=4, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Could not serialize tasks: {exc}") from exc
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(data)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc
        logger.info("Saved %d tasks to %s", len(task_list), path)

"""Task list logic: ordered tasks, id assignment, mutation, queries and rendering.

Ids are assigned as len(tasks) + 1 at insertion time. After a delete the
next add can reuse an id that is still taken; stored files written by earlier
versions rely on this numbering, so it is kept as-is.
"""
import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional
from models import Task
from theme import color, status_color, ID_COLOR, EMPTY_COLOR

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No tasks available."
NO_COMPLETED_MESSAGE = "No completed tasks found."
NO_PENDING_MESSAGE = "No pending tasks found."


def format_task(task: Task) -> str:
    """Render one task as '#<id>: <description> [<Done|Not done>]'."""
    label = color(f"[{task.status_label}]", status_color(task.done))
    return f"{color(f'#{task.id}:', ID_COLOR)} {task.description} {label}"


def render(tasks: List[Task], empty_message: str) -> str:
    if not tasks:
        return color(empty_message, EMPTY_COLOR)
    return "\n".join(format_task(t) for t in tasks)


class TaskList:
    def __init__(self, tasks: Optional[List[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- loading --------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskList":
        """Build a list from the stored {"todos": [...]} document.

        Raises ValueError if the document does not have that shape.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        if 'todos' not in data:
            raise ValueError("missing 'todos' key")
        raw_tasks = data['todos']
        if not isinstance(raw_tasks, list):
            raise ValueError("'todos' must be an array")
        return cls([Task.from_dict(raw) for raw in raw_tasks])

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def find(self, task_id: int) -> Optional[Task]:
        """First task with the given id, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def matching(self, keyword: str) -> List[Task]:
        needle = keyword.lower()
        return [t for t in self.tasks if needle in t.description.lower()]

    def with_status(self, done: bool) -> List[Task]:
        return [t for t in self.tasks if t.done == done]

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        task = Task(id=len(self.tasks) + 1, description=description)
        self.tasks.append(task)
        logger.debug("Added task id=%s", task.id)
        return task

    def delete(self, task_id: int) -> int:
        """Remove every task with this id; returns how many were removed."""
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        removed = before - len(self.tasks)
        if not removed:
            logger.debug("delete: no task with id=%s", task_id)
        return removed

    def edit(self, task_id: int, new_description: str) -> bool:
        task = self.find(task_id)
        if task is None:
            logger.debug("edit: no task with id=%s", task_id)
            return False
        task.edit(new_description)
        return True

    def mark_done(self, task_id: int) -> bool:
        task = self.find(task_id)
        if task is None:
            logger.debug("mark_done: no task with id=%s", task_id)
            return False
        task.mark_done()
        return True

    # -------------------- display --------------------
    def list(self) -> str:
        return render(self.tasks, EMPTY_MESSAGE)

    def search(self, keyword: str) -> str:
        return render(self.matching(keyword), f"No tasks found with keyword '{keyword}'.")

    def filter_by_status(self, done: bool) -> str:
        empty = NO_COMPLETED_MESSAGE if done else NO_PENDING_MESSAGE
        return render(self.with_status(done), empty)

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {'todos': [t.to_dict() for t in self.tasks]}

    def __str__(self) -> str:
        done = len(self.with_status(True))
        return f'{len(self.tasks)} tasks, {done} done, {len(self.tasks) - done} pending'

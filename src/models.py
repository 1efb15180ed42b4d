"""Data models for the terminal todo application.

Exposes the Task dataclass. A task is identified by a small integer id that
the owning TaskList assigns; the JSON form is {"id", "description", "done"}.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping

@dataclass
class Task:
    """A single todo entry.

    Fields:
        id: Integer id assigned by the TaskList (len + 1 at insertion time).
        description: Free-form text; may be empty.
        done: Completion flag, False when created.
    """
    id: int
    description: str
    done: bool = False

    def mark_done(self) -> None:
        self.done = True

    def edit(self, new_description: str) -> None:
        self.description = new_description

    @property
    def status_label(self) -> str:
        return "Done" if self.done else "Not done"

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'description': self.description, 'done': self.done}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from its stored form; unknown keys are ignored.

        Raises ValueError when a field is missing or has the wrong type.
        bool is a subclass of int, so it is rejected explicitly for ids.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")
        tid = raw.get('id')
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 0:
            raise ValueError(f"invalid task id: {tid!r}")
        description = raw.get('description')
        if not isinstance(description, str):
            raise ValueError(f"task {tid}: description must be a string")
        done = raw.get('done')
        if not isinstance(done, bool):
            raise ValueError(f"task {tid}: done must be a boolean")
        return cls(id=tid, description=description, done=done)

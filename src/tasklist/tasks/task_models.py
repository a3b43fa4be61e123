# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """
    One entry of the task list.

    A task has no id: its position in the list is its identity.
    """

    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        # Field names match files written by earlier versions of the tool.
        return {"description": self.description, "isCompleted": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Build a Task from one decoded JSON record; raises ValueError on bad shape."""
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        description = raw.get("description", "")
        completed = raw.get("isCompleted", False)
        if not isinstance(description, str):
            raise ValueError("task description must be a string")
        if not isinstance(completed, bool):
            raise ValueError("task isCompleted must be a boolean")

        return cls(description=description, completed=completed)

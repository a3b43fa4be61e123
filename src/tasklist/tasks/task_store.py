# src/tasklist/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Base class for task store failures; str(exc) is a user-facing message."""


class StorageError(TaskStoreError):
    """Backing file could not be read, parsed or written."""


class InvalidTaskNumber(TaskStoreError, IndexError):
    def __init__(self, index: int) -> None:
        super().__init__("Invalid task number.")
        self.index = index


class CannotMoveTask(TaskStoreError):
    def __init__(self, index: int, direction: str) -> None:
        super().__init__(f"Cannot move task {direction}.")
        self.index = index
        self.direction = direction


class TaskStore:
    """
    Ordered task list backed by a single JSON file.

    Persistence is whole-list: every successful mutation rewrites the file.
    Mutations are applied in memory first; if the write then fails,
    StorageError is raised and the in-memory change is kept.

    Indices are 0-based. Converting user-facing numbers is the caller's job.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the current list (copies, so callers cannot mutate the store)."""
        return [Task(t.description, t.completed) for t in self._tasks]

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- persistence ----

    def load(self) -> None:
        """
        Replace the in-memory list with the backing file's content.

        A missing file is not an error. Any other failure leaves the list empty
        and raises StorageError.
        """
        self._tasks = []

        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty.", self._path)
            return
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Error reading file: {e}") from e

        try:
            data = json.loads(raw)
            if data is None:
                data = []
            if not isinstance(data, list):
                raise ValueError(f"expected a list of tasks, got {type(data).__name__}")
            tasks = [Task.from_dict(item) for item in data]
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too.
            raise StorageError(f"Error parsing JSON: {e}") from e

        self._tasks = tasks
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)

    def save(self) -> None:
        """Overwrite the backing file with the full list."""
        try:
            payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2)
            # Lone surrogates survive dumps and only fail here.
            data = payload.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise StorageError(f"Error encoding JSON: {e}") from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Error writing file: {e}") from e

        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)

    # ---- helpers ----

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise InvalidTaskNumber(index)

    # ---- public API ----

    def get(self, index: int) -> Task:
        self._check_index(index)
        t = self._tasks[index]
        return Task(t.description, t.completed)

    def add(self, description: str) -> Task:
        task = Task(description=description, completed=False)
        self._tasks.append(task)
        logger.debug("Task added at %d: %r", len(self._tasks) - 1, description)
        self.save()
        return Task(task.description, task.completed)

    def toggle(self, index: int) -> bool:
        """Flip the completed flag; returns the new value."""
        self._check_index(index)
        task = self._tasks[index]
        task.completed = not task.completed
        logger.debug("Task %d completed=%s", index, task.completed)
        self.save()
        return task.completed

    def remove(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task %d removed: %r", index, task.description)
        self.save()
        return task

    def move_up(self, index: int) -> None:
        if not 0 < index < len(self._tasks):
            raise CannotMoveTask(index, "up")
        self._tasks[index - 1], self._tasks[index] = self._tasks[index], self._tasks[index - 1]
        self.save()

    def move_down(self, index: int) -> None:
        if not 0 <= index < len(self._tasks) - 1:
            raise CannotMoveTask(index, "down")
        self._tasks[index], self._tasks[index + 1] = self._tasks[index + 1], self._tasks[index]
        self.save()

    def rename(self, index: int, new_description: str) -> str:
        """Replace the description; returns the old one."""
        self._check_index(index)
        task = self._tasks[index]
        old = task.description
        task.description = new_description
        logger.debug("Task %d renamed %r -> %r", index, old, new_description)
        self.save()
        return old

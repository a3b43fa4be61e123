# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on these Protocols instead of the concrete TaskStore, so
tests can hand in doubles without touching the filesystem.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
# Side channel for messages printed before a command's main output (e.g. write errors).


class TaskRepo(Protocol):
    @property
    def tasks(self) -> list[Task]: ...

    def __len__(self) -> int: ...

    def load(self) -> None: ...
    def save(self) -> None: ...

    def get(self, index: int) -> Task: ...
    def add(self, description: str) -> Task: ...
    def toggle(self, index: int) -> bool: ...
    def remove(self, index: int) -> Task: ...
    def move_up(self, index: int) -> None: ...
    def move_down(self, index: int) -> None: ...
    def rename(self, index: int, new_description: str) -> str: ...

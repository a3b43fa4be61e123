# src/tasklist/tasks/task_view.py

from __future__ import annotations

from collections.abc import Sequence

from .task_models import Task

DONE_MARK = "[X]"
OPEN_MARK = "[ ]"


def checkbox(task: Task) -> str:
    return DONE_MARK if task.completed else OPEN_MARK


def render_task_list(tasks: Sequence[Task]) -> str:
    """
    Numbered list, 1-based, framed by blank lines:

        1. [ ] buy milk
        2. [X] call mom
    """
    if not tasks:
        return "No tasks."
    lines = [""]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}. {checkbox(task)} {task.description}")
    lines.append("")
    return "\n".join(lines)


def render_rename(old: str, new: str) -> str:
    return f"  From: {old}\n  To:   {new}"

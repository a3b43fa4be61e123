# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete TaskStore into AppState,
- performs the single startup load of the task file.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import CommandEmitter
from ..core.state import AppState
from ..tasks.task_store import StorageError, TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.data_file),
    )


def load_tasks(state: AppState, emit: CommandEmitter | None = None) -> bool:
    """
    Load the task file once at startup.

    A corrupt or unreadable file is reported and the app starts with an empty
    list; the next save then overwrites that file.
    Returns False if the load failed.
    """
    try:
        state.task_store.load()
    except StorageError as e:
        logger.warning("Failed to load tasks from %s: %s", state.settings.data_file, e)
        if emit is not None:
            emit(str(e))
        return False
    return True

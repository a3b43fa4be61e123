# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment and .env.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="ERROR",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        data_file=tmp_path / "tasks.json",
        prompt="> ",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.data_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real TaskStore in a temp directory.

    Writing the JSON file is part of what we want to test.
    """
    return AppState(settings=settings, task_store=store)

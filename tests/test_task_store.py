# tests/test_task_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tasklist.tasks.task_models import Task
from tasklist.tasks.task_store import (
    CannotMoveTask,
    InvalidTaskNumber,
    StorageError,
    TaskStore,
)


def _descriptions(store: TaskStore) -> list[str]:
    return [t.description for t in store.tasks]


def _filled(path: Path, *descriptions: str) -> TaskStore:
    store = TaskStore(path)
    for d in descriptions:
        store.add(d)
    return store


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope.json")
    store.load()
    assert store.tasks == []
    assert not (tmp_path / "nope.json").exists()


def test_add_appends_incomplete_and_writes_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    store = _filled(path, "first")

    store.add("second")

    assert len(store) == 2
    assert store.tasks[-1] == Task("second", False)
    on_disk = json.loads(path.read_text("utf-8"))
    assert on_disk == [
        {"description": "first", "isCompleted": False},
        {"description": "second", "isCompleted": False},
    ]


def test_toggle_twice_restores_flag(tmp_path: Path) -> None:
    store = _filled(tmp_path / "tasks.json", "a", "b")

    assert store.toggle(1) is True
    assert store.toggle(1) is False
    assert [t.completed for t in store.tasks] == [False, False]


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_out_of_range_index_raises_and_keeps_list(tmp_path: Path, index: int) -> None:
    store = _filled(tmp_path / "tasks.json", "a", "b")
    before = store.tasks

    for op in (store.toggle, store.remove, store.get):
        with pytest.raises(InvalidTaskNumber):
            op(index)
    with pytest.raises(InvalidTaskNumber):
        store.rename(index, "zzz")

    assert store.tasks == before


def test_remove_keeps_relative_order(tmp_path: Path) -> None:
    store = _filled(tmp_path / "tasks.json", "a", "b", "c", "d")

    removed = store.remove(1)

    assert removed.description == "b"
    assert _descriptions(store) == ["a", "c", "d"]


def test_move_up_and_down_swap_neighbours(tmp_path: Path) -> None:
    store = _filled(tmp_path / "tasks.json", "a", "b", "c")

    store.move_up(2)
    assert _descriptions(store) == ["a", "c", "b"]

    store.move_down(0)
    assert _descriptions(store) == ["c", "a", "b"]


def test_move_at_boundaries_reports_failure(tmp_path: Path) -> None:
    store = _filled(tmp_path / "tasks.json", "a", "b")

    with pytest.raises(CannotMoveTask, match="Cannot move task up."):
        store.move_up(0)
    with pytest.raises(CannotMoveTask, match="Cannot move task down."):
        store.move_down(1)
    with pytest.raises(CannotMoveTask):
        store.move_up(2)

    assert _descriptions(store) == ["a", "b"]


def test_rename_returns_old_description(tmp_path: Path) -> None:
    store = _filled(tmp_path / "tasks.json", "buy milk")
    store.toggle(0)

    old = store.rename(0, "buy oat milk")

    assert old == "buy milk"
    assert store.get(0) == Task("buy oat milk", True)


def test_tasks_snapshot_is_detached(tmp_path: Path) -> None:
    store = _filled(tmp_path / "tasks.json", "a")

    snapshot = store.tasks
    snapshot[0].description = "changed"
    snapshot.append(Task("extra"))

    assert _descriptions(store) == ["a"]


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    store = _filled(path, "one", "zwei", "три")
    store.toggle(1)

    reloaded = TaskStore(path)
    reloaded.load()

    assert reloaded.tasks == store.tasks


def test_load_reads_compact_legacy_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(
        '[{"description":"old","isCompleted":true},{"description":"new"}]', "utf-8"
    )

    store = TaskStore(path)
    store.load()

    assert store.tasks == [Task("old", True), Task("new", False)]


def test_load_null_document_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("null", "utf-8")

    store = TaskStore(path)
    store.load()

    assert store.tasks == []


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "",
        '{"description": "x"}',
        '["just a string"]',
        '[{"description": 5, "isCompleted": false}]',
        '[{"description": "x", "isCompleted": "yes"}]',
    ],
)
def test_load_bad_content_raises_and_leaves_list_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    store = _filled(path, "stale")
    path.write_text(content, "utf-8")

    with pytest.raises(StorageError, match="Error parsing JSON"):
        store.load()

    assert store.tasks == []


def test_load_unreadable_path_raises(tmp_path: Path) -> None:
    # A directory where the file should be cannot be read as text.
    path = tmp_path / "tasks.json"
    path.mkdir()

    store = TaskStore(path)
    with pytest.raises(StorageError, match="Error reading file"):
        store.load()
    assert store.tasks == []


def test_failed_write_keeps_in_memory_change(tmp_path: Path) -> None:
    # The target is a directory, so replacing it with a file fails.
    path = tmp_path / "tasks.json"
    path.mkdir()
    store = TaskStore(path)

    with pytest.raises(StorageError, match="Error writing file"):
        store.add("kept anyway")

    assert _descriptions(store) == ["kept anyway"]


def test_failed_write_leaves_no_temp_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.mkdir()
    store = TaskStore(path)

    with pytest.raises(StorageError):
        store.add("x")

    assert not (tmp_path / "tasks.json.tmp").exists()


def test_unencodable_description_is_a_storage_error(tmp_path: Path) -> None:
    # Lone surrogates arrive from stdin decoded with surrogateescape.
    path = tmp_path / "tasks.json"
    store = _filled(path, "good")

    with pytest.raises(StorageError, match="Error encoding JSON"):
        store.add("bad \udcff")

    assert _descriptions(store) == ["good", "bad \udcff"]
    assert json.loads(path.read_text("utf-8")) == [{"description": "good", "isCompleted": False}]
    assert not (tmp_path / "tasks.json.tmp").exists()

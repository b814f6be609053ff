# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_api.app.core.errors import NotFoundError, StoreError
from task_api.app.schemas.task import Task
from task_api.app.store.task_store import SQLiteTaskStore


def test_create_then_get_round_trip(store: SQLiteTaskStore) -> None:
    created = store.create(Task(title="T", description="D", completed=False))
    assert created.id > 0

    fetched = store.get_by_id(created.id)
    assert fetched == Task(id=created.id, title="T", description="D", completed=False)


def test_create_ignores_caller_id(store: SQLiteTaskStore) -> None:
    first = store.create(Task(id=99, title="a"))
    second = store.create(Task(id=99, title="b"))
    assert (first.id, second.id) == (1, 2)


def test_get_all_empty_is_list(store: SQLiteTaskStore) -> None:
    assert store.get_all() == []


def test_get_all_returns_every_task(store: SQLiteTaskStore) -> None:
    payloads = [
        Task(title="one", description="", completed=False),
        Task(title="two", description="x", completed=True),
        Task(title="three", description="y", completed=False),
    ]
    created = [store.create(p) for p in payloads]

    tasks = store.get_all()
    assert len(tasks) == 3
    for original, stored in zip(created, tasks):
        assert stored == original


def test_get_missing_raises_not_found(store: SQLiteTaskStore) -> None:
    with pytest.raises(NotFoundError):
        store.get_by_id(12345)


def test_update_replaces_all_fields(store: SQLiteTaskStore) -> None:
    created = store.create(Task(title="old", description="old desc", completed=False))

    updated = store.update(created.id, Task(title="A", description="", completed=True))
    assert updated.id == created.id

    assert store.get_by_id(created.id) == Task(id=created.id, title="A", description="", completed=True)


def test_update_missing_id_is_not_an_error(store: SQLiteTaskStore) -> None:
    result = store.update(777, Task(id=5, title="ghost"))
    assert result.id == 777
    assert result.title == "ghost"
    assert store.get_all() == []


def test_delete_removes_and_is_idempotent(store: SQLiteTaskStore) -> None:
    keep = store.create(Task(title="keep"))
    gone = store.create(Task(title="gone"))

    store.delete(gone.id)
    store.delete(gone.id)
    store.delete(424242)

    with pytest.raises(NotFoundError):
        store.get_by_id(gone.id)
    assert store.get_all() == [keep]


def test_ids_are_not_reused_after_delete(store: SQLiteTaskStore) -> None:
    first = store.create(Task(title="first"))
    store.delete(first.id)
    second = store.create(Task(title="second"))
    assert second.id > first.id


def test_missing_table_raises_store_error(tmp_path: Path) -> None:
    store = SQLiteTaskStore(str(tmp_path / "empty.db"))
    with pytest.raises(StoreError) as excinfo:
        store.get_all()
    assert "no such table" in str(excinfo.value)

    with pytest.raises(StoreError):
        store.create(Task(title="x"))
    with pytest.raises(StoreError):
        store.update(1, Task(title="x"))
    with pytest.raises(StoreError):
        store.delete(1)
    with pytest.raises(StoreError):
        store.get_by_id(1)


def test_unopenable_database_raises_store_error(tmp_path: Path) -> None:
    store = SQLiteTaskStore(str(tmp_path / "missing-dir" / "tasks.db"))
    with pytest.raises(StoreError):
        store.get_all()


def test_out_of_range_id_raises_store_error(store: SQLiteTaskStore) -> None:
    too_big = 2**64
    with pytest.raises(StoreError):
        store.get_by_id(too_big)
    with pytest.raises(StoreError):
        store.update(too_big, Task(title="x"))
    with pytest.raises(StoreError):
        store.delete(too_big)

# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from task_api.app.core.config import Settings
from task_api.app.core.db import init_db
from task_api.app.main import create_app
from task_api.app.services.task_service import TaskService
from task_api.app.store.task_store import SQLiteTaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    path = str(tmp_path / "tasks.db")
    init_db(path)
    return path


@pytest.fixture()
def store(db_path: str) -> SQLiteTaskStore:
    return SQLiteTaskStore(db_path)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def service(store: SQLiteTaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(database_url=str(tmp_path / "app.db"), log_level="DEBUG")


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    """
    TestClient over the real application wiring.

    Entering the context runs the startup hook, which creates the schema.
    """
    with TestClient(create_app(settings)) as test_client:
        yield test_client

# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.config import Settings
from task_tracker.main import create_app
from task_tracker.models.category import Category
from task_tracker.models.task import TaskCreate
from task_tracker.models.user import User
from task_tracker.persistence.json_file import JsonFileSink
from task_tracker.services.ids import SequentialIdGenerator
from task_tracker.services.reference_service import ReferenceService
from task_tracker.services.task_store import TaskStore

from .fakes import MemorySink


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing every path at the per-test tmp dir.

    Built directly rather than from the environment to keep tests deterministic.
    """
    return Settings(
        app_name="Task Tracker (test)",
        log_level="DEBUG",
        log_dir=None,
        host="127.0.0.1",
        port=3000,
        data_dir=tmp_path,
        storage_backend="json",
        tasks_file=tmp_path / "tasks.json",
        tasks_db_path=tmp_path / "tasks.sqlite3",
        id_scheme="uuid",
        save_retries=0,
        save_retry_delay_seconds=0.0,
        users_file=tmp_path / "users.json",
        categories_file=tmp_path / "categories.json",
    )


@pytest.fixture()
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture()
def store(sink: MemorySink) -> TaskStore:
    """Store over an in-memory sink with sequential ids, so ids are predictable."""
    s = TaskStore(sink, SequentialIdGenerator())
    s.load()
    return s


@pytest.fixture()
def file_store(settings: Settings) -> TaskStore:
    """Store over a real JSON file in the tmp dir."""
    s = TaskStore(JsonFileSink(settings.tasks_file))
    s.load()
    return s


@pytest.fixture()
def reference() -> ReferenceService:
    return ReferenceService(
        users=[User(id="1", name="Alice Johnson"), User(id="2", name="Bob Smith")],
        categories=[Category(id="1", name="Work"), Category(id="2", name="Personal")],
    )


@pytest.fixture()
def client(settings: Settings, file_store: TaskStore, reference: ReferenceService):
    app = create_app(settings, task_store=file_store, reference_service=reference)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_task(store: TaskStore):
    """Create a task in `store` with sensible defaults."""

    def _make(title: str = "Buy milk", due_date: str = "2024-12-01", **fields):
        return store.create_task(TaskCreate(title=title, due_date=due_date, **fields))

    return _make

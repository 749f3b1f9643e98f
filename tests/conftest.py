# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Taskmate",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        storage_backend="json",
        storage_path=tmp_path / "data" / "storage.json",
        default_theme="medium",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def store(storage: FakeStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FakeStorage, store: TaskStore) -> AppState:
    """AppState wired with the fake storage and clock."""
    return AppState(settings=settings, storage=storage, store=store)

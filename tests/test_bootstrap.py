# tests/test_bootstrap.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from taskmate.cli.bootstrap import create_initial_state, open_storage
from taskmate.core.errors import StorageError
from taskmate.storage.json_file import JsonFileStorage
from taskmate.storage.memory import MemoryStorage
from taskmate.storage.sqlite_kv import SQLiteStorage

from .fakes import FakeClock


def test_create_initial_state_uses_json_file(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings, clock=FakeClock())

    assert settings.data_dir.is_dir()
    assert isinstance(state.storage, JsonFileStorage)
    assert state.store.tasks == ()

    state.store.set_input_text("Buy milk")
    state.store.submit()
    assert settings.storage_path.exists()

    again = create_initial_state(settings=settings)
    assert [t.name for t in again.store.tasks] == ["Buy milk"]


def test_default_theme_comes_from_settings(settings: SimpleNamespace) -> None:
    settings.default_theme = "light"
    state = create_initial_state(settings=settings)
    assert state.store.theme == "light"


@pytest.mark.parametrize(
    ("backend", "cls"),
    [("json", JsonFileStorage), ("sqlite", SQLiteStorage), ("memory", MemoryStorage)],
)
def test_open_storage_backends(settings: SimpleNamespace, backend: str, cls: type) -> None:
    settings.storage_backend = backend
    if backend == "sqlite":
        settings.storage_path = settings.data_dir / "storage.sqlite3"
    assert isinstance(open_storage(settings), cls)


def test_open_storage_unknown_backend(settings: SimpleNamespace) -> None:
    settings.storage_backend = "redis"
    with pytest.raises(ValueError):
        open_storage(settings)


@pytest.mark.parametrize("backend", ["json", "sqlite"])
def test_unreadable_storage_starts_with_defaults(
    settings: SimpleNamespace, backend: str, caplog: pytest.LogCaptureFixture
) -> None:
    settings.storage_backend = backend
    settings.storage_path.mkdir(parents=True)

    with caplog.at_level(logging.ERROR, logger="taskmate"):
        state = create_initial_state(settings=settings)

    assert state.store.tasks == ()
    assert state.store.theme == "medium"
    assert any("Storage read failed" in r.getMessage() for r in caplog.records)

    state.store.set_input_text("Buy milk")
    with pytest.raises(StorageError):
        state.store.submit()

# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- picks the storage backend and wires it into a TaskStore,
- returns the AppState the console connector works with.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock, KeyValueStorage
from ..core.state import AppState
from ..storage.json_file import JsonFileStorage
from ..storage.memory import MemoryStorage
from ..storage.sqlite_kv import SQLiteStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def open_storage(settings) -> KeyValueStorage:
    backend = settings.storage_backend
    if backend == "memory":
        logger.info("Using in-memory storage; tasks will not survive a restart.")
        return MemoryStorage()
    if backend == "sqlite":
        return SQLiteStorage(settings.storage_path)
    if backend == "json":
        return JsonFileStorage(settings.storage_path)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    storage = open_storage(settings)
    store = TaskStore(storage, clock=clock, default_theme=settings.default_theme)
    return AppState(settings=settings, storage=storage, store=store)

# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import KeyValueStorage


@dataclass
class AppState:
    # Settings are kept on the state so the presentation layer can read them.
    settings: object

    storage: KeyValueStorage
    store: TaskStore

# src/taskmate/tasks/task_store.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.errors import MalformedStorageError, StorageError, TaskNotFoundError
from ..core.ports import Clock, KeyValueStorage
from .task_codec import decode_tasks, decode_theme, encode_tasks, encode_theme
from .task_models import DEFAULT_THEME, TASKLIST_KEY, THEME_KEY, TaskList
from .task_ops import append_task, find_task, remove_task, rename_task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list mirrored to a key-value storage.

    State:
    - tasks: ordered TaskList (persisted under "tasklist")
    - theme: opaque theme name (persisted under "theme")
    - input_text / edit_id: the pending form, never persisted

    Persistence:
    - both stored values are read once on construction (or reload())
    - missing or malformed values fall back to defaults and are logged
    - every mutation writes the whole serialized value back

    The list itself is immutable: each operation swaps in a new tuple and
    returns it.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        clock: Clock | None = None,
        default_theme: str = DEFAULT_THEME,
    ) -> None:
        self._storage = storage
        self._clock: Clock = clock or datetime.now
        self._default_theme = default_theme

        self._tasks: TaskList = ()
        self._theme = default_theme
        self._input_text = ""
        self._edit_id: int | None = None

        self._load()
        logger.info("TaskStore ready tasks=%d theme=%s", len(self._tasks), self._theme)

    # ---- read-only state ----

    @property
    def tasks(self) -> TaskList:
        return self._tasks

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def edit_id(self) -> int | None:
        return self._edit_id

    @property
    def is_editing(self) -> bool:
        return self._edit_id is not None

    # ---- load / save ----

    def _read(self, key: str) -> str | None:
        try:
            return self._storage.load(key)
        except StorageError:
            logger.exception("Storage read failed for key=%s; using default.", key)
            return None

    def _load(self) -> None:
        raw_tasks = self._read(TASKLIST_KEY)
        tasks: TaskList = ()
        if raw_tasks is not None:
            try:
                tasks = decode_tasks(raw_tasks)
            except MalformedStorageError as e:
                logger.warning("%s; starting with an empty list.", e)

        raw_theme = self._read(THEME_KEY)
        theme = self._default_theme
        if raw_theme is not None:
            try:
                theme = decode_theme(raw_theme, self._default_theme)
            except MalformedStorageError as e:
                logger.warning("%s; using theme %r.", e, self._default_theme)

        self._tasks = tasks
        self._theme = theme

    def _save_tasks(self) -> None:
        self._storage.save(TASKLIST_KEY, encode_tasks(self._tasks))

    def _save_theme(self) -> None:
        self._storage.save(THEME_KEY, encode_theme(self._theme))

    def reload(self) -> None:
        """Re-read persisted state, as on a fresh start. The pending form is discarded."""
        self._input_text = ""
        self._edit_id = None
        self._load()
        logger.debug("TaskStore reloaded tasks=%d theme=%s", len(self._tasks), self._theme)

    # ---- operations ----

    def set_input_text(self, text: str) -> None:
        self._input_text = text

    def submit(self) -> TaskList:
        """
        Submit the pending form.

        - editing: rename the selected task to input_text, clear the form
        - not editing, non-empty input: append a new task, clear the input
        - not editing, empty input: no-op (nothing written)

        Raises TaskNotFoundError if the selected task is gone; state is kept.
        """
        if self._edit_id is not None:
            edit_id = self._edit_id
            self._tasks = rename_task(self._tasks, edit_id, self._input_text, self._clock())
            self._edit_id = None
            self._input_text = ""
            self._save_tasks()
            logger.debug("Task updated id=%s", edit_id)
            return self._tasks

        if not self._input_text:
            return self._tasks

        self._tasks = append_task(self._tasks, self._input_text, self._clock())
        self._input_text = ""
        self._save_tasks()
        logger.debug("Task added id=%s total=%d", self._tasks[-1].id, len(self._tasks))
        return self._tasks

    def select_for_edit(self, task_id: int) -> None:
        task = find_task(self._tasks, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        self._input_text = task.name
        self._edit_id = task_id

    def cancel_edit(self) -> None:
        self._edit_id = None
        self._input_text = ""

    def delete(self, task_id: int) -> TaskList:
        """
        Remove a task if present (unknown ids are a no-op).

        Deleting the task under edit also cancels the edit, so the selection
        never points at a missing task.
        """
        updated = remove_task(self._tasks, task_id)
        if len(updated) == len(self._tasks):
            return self._tasks

        self._tasks = updated
        if self._edit_id == task_id:
            self.cancel_edit()
        self._save_tasks()
        logger.debug("Task deleted id=%s total=%d", task_id, len(self._tasks))
        return self._tasks

    def clear(self) -> TaskList:
        """Remove every task and cancel any edit. Nothing is written if already empty."""
        self.cancel_edit()
        if not self._tasks:
            return self._tasks

        removed = len(self._tasks)
        self._tasks = ()
        self._save_tasks()
        logger.debug("Task list cleared removed=%d", removed)
        return self._tasks

    def set_theme(self, value: str) -> None:
        self._theme = value
        self._save_theme()
        logger.debug("Theme set to %s", value)

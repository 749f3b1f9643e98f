# src/taskmate/tasks/task_models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Final

TASKLIST_KEY: Final = "tasklist"
THEME_KEY: Final = "theme"

DEFAULT_THEME: Final = "medium"

# Themes offered by the header switcher. Hints only: any string is accepted.
KNOWN_THEMES: Final[tuple[str, ...]] = ("light", "medium", "dark", "gOne", "gTwo", "gThree")


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Fields:
        id: milliseconds since epoch at creation; unique and never changed.
        name: user-supplied text.
        time: "<local time> <local date>" of the last create/update.
    """

    id: int
    name: str
    time: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


TaskList = tuple[Task, ...]

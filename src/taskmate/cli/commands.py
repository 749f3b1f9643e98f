# src/taskmate/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import TaskNotFoundError
from ..core.state import AppState
from ..tasks.task_models import KNOWN_THEMES, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /edit, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any other line adds a task (or saves the task being edited).")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task, position: int, editing: bool = False) -> str:
    marker = "*" if editing else " "
    return f"{marker}#{position:<3} {task.name}  ({task.time})  [id {task.id}]"


def format_task_list(state: AppState) -> str:
    store = state.store
    app_name = str(getattr(state.settings, "app_name", "Taskmate"))

    lines = [f"{app_name}  [theme: {store.theme}]", f"Todo {len(store.tasks)}"]
    if not store.tasks:
        lines.append("  (no tasks)")
    for i, task in enumerate(store.tasks, start=1):
        lines.append(format_task(task, i, editing=task.id == store.edit_id))
    if store.is_editing:
        lines.append(f"Editing id {store.edit_id}: type the new name, or /cancel.")
    return "\n".join(lines)


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def _resolve_id(state: AppState, token: str) -> int | None:
    """
    Accept either a task id ("1697551509000") or a list position ("#2").
    Returns None if the token is neither.
    """
    token = token.strip()
    if token.startswith("#"):
        pos = _parse_int(token[1:])
        if pos is None:
            return None
        tasks = state.store.tasks
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1].id
        # Out of range: a position that cannot match any id.
        return -1
    return _parse_int(token)


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id|#pos>            -> start editing, next plain line is the new name
    /edit <id|#pos> <new name> -> rename in one step
    """
    if not args:
        return "Usage: /edit <id|#pos> [new name]"

    task_id = _resolve_id(state, args[0])
    if task_id is None:
        return f"Not a task id or position: {args[0]}"

    try:
        state.store.select_for_edit(task_id)
    except TaskNotFoundError:
        return f"No task {args[0]}."

    if len(args) > 1:
        state.store.set_input_text(" ".join(args[1:]))
        state.store.submit()
        return format_task_list(state)

    return f"Editing: {state.store.input_text}\nType the new name, or /cancel."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if not state.store.is_editing:
        return "Nothing to cancel."
    state.store.cancel_edit()
    return "Edit cancelled."


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <id|#pos>"

    task_id = _resolve_id(state, args[0])
    if task_id is None:
        return f"Not a task id or position: {args[0]}"

    before = len(state.store.tasks)
    state.store.delete(task_id)
    if len(state.store.tasks) == before:
        return f"No task {args[0]}."
    return format_task_list(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.store.clear()
    return format_task_list(state)


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme         -> show current theme
    /theme <name>  -> switch theme (any name is accepted)
    """
    if not args:
        return f"Theme: {state.store.theme} (known: {', '.join(KNOWN_THEMES)})"

    value = args[0]
    state.store.set_theme(value)
    if value not in KNOWN_THEMES:
        logger.debug("Custom theme selected: %s", value)
    return f"Theme set to {value}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id|#pos> [new name].")
registry.register("cancel", cmd_cancel, help_text="Cancel the edit in progress.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id|#pos>.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
registry.register("theme", cmd_theme, help_text="Show or set the theme: /theme [name].")

# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import format_task_list, registry as command_registry
from ..core.errors import StorageError, TaskNotFoundError
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _prompt(state: AppState) -> str:
    return "edit> " if state.store.is_editing else "add> "


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one line of console input and return the text to print.

    Slash-commands go to the registry; anything else becomes the form input
    and is submitted (add a task, or save the edit in progress).
    """
    cmd_response = command_registry.handle(state, line)
    if cmd_response is not None:
        return cmd_response

    store = state.store
    store.set_input_text(line)
    try:
        store.submit()
    except TaskNotFoundError as e:
        logger.warning("Submit failed: %s", e)
        store.cancel_edit()
        return "The task being edited no longer exists; edit cancelled."
    return format_task_list(state)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.store.tasks))
    write(format_task_list(state))
    write("Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line(_prompt(state)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = handle_line(state, user_input)
        except StorageError:
            logger.exception("Storage write failed.")
            response = "Could not save your changes (see log). The list shown may not be persisted."

        if response:
            write(response)

    logger.info("Console connector finished.")

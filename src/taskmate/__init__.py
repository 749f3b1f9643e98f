"""
Taskmate: a small persistent task list.

Packages:
- tasks/: Task model, pure list operations, storage codec, TaskStore
- storage/: key-value backends (memory, JSON file, SQLite)
- core/: ports, errors, app state
- cli/ + connectors/: console front-end
"""

__version__ = "0.1.0"

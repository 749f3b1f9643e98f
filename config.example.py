# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMATE_APP_NAME": "Name shown in the list header (default: Taskmate).",
    "TASKMATE_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKMATE_LOG_TO_FILE": "Write full debug logs to <data_dir>/taskmate.log (default: true).",
    # Storage
    "TASKMATE_DATA_DIR": "Local data directory (default: .local/taskmate).",
    "TASKMATE_STORAGE_BACKEND": "json | sqlite | memory (default: json).",
    "TASKMATE_STORAGE_PATH": (
        "Storage file (default: <data_dir>/storage.json or <data_dir>/storage.sqlite3)."
    ),
    # Presentation
    "TASKMATE_DEFAULT_THEME": "Theme used when none is stored (default: medium).",
}

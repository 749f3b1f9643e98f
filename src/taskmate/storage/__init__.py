"""
Key-value storage backends implementing core.ports.KeyValueStorage.

- memory.py: process-local dict
- json_file.py: one JSON object file, rewritten atomically on save
- sqlite_kv.py: SQLite table with one row per key
"""

"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskList) and storage keys
- task_ops.py: pure list transformations returning new lists
- task_codec.py: JSON encode/decode for the stored values
- task_store.py: state container that loads once and saves after each change
"""

"""
Task subsystem.

Components:
- task_models.py: the Task value type
- task_store.py: in-memory, lock-guarded storage with add/list/complete/delete
- status_reporter.py: cancellable periodic status loop (runs in a background thread)
"""

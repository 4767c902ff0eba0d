# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI layer.

Commands depend on these Protocols instead of concrete implementations,
so the store can be swapped (or faked in tests) without touching the CLI.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def add_task(self, title: str) -> Task: ...
    def list_tasks(self) -> list[Task]: ...
    def complete_task(self, title: str) -> int: ...
    def delete_task(self, title: str) -> int: ...
    def count_tasks(self) -> int: ...
    def close(self) -> None: ...


class BackgroundService(Protocol):
    """Something with a start/stop lifecycle that runs alongside the console."""

    @property
    def running(self) -> bool: ...

    def stop(self, timeout: float | None = 5.0) -> None: ...

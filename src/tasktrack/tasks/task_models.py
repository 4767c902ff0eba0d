# src/tasktrack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace

DONE_MARK = "✔"
OPEN_MARK = "✗"


@dataclass(slots=True, frozen=True)
class Task:
    """
    One tracked item.

    Notes:
    - title is the lookup key but is NOT unique; several tasks may share it.
    - completed only ever goes False -> True.
    """

    title: str
    completed: bool = False

    def mark_completed(self) -> Task:
        if self.completed:
            return self
        return replace(self, completed=True)

    @property
    def status_mark(self) -> str:
        return DONE_MARK if self.completed else OPEN_MARK

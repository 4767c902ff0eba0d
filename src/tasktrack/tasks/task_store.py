# src/tasktrack/tasks/task_store.py

from __future__ import annotations

import logging
import threading

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Tasks are kept in insertion order. Titles are matched exactly
    (case-sensitive, no stripping) and are not unique: complete/delete
    apply to every task with the given title.

    Thread-safety:
    - every method holds a single lock for its whole body
    - nothing is logged or printed while the lock is held
    - readers get a copy of the sequence, never the live list
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        logger.info("TaskStore ready (in-memory)")

    def close(self) -> None:
        """Compatibility hook for shutdown (nothing to release)."""
        return

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def add_task(self, title: str) -> Task:
        task = Task(title=title)
        with self._lock:
            self._tasks.append(task)
            total = len(self._tasks)
        logger.debug("Task added title=%r total=%s", title, total)
        return task

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return list(self._tasks)

    def complete_task(self, title: str) -> int:
        """
        Mark every task titled `title` as completed.

        Returns the number of matching tasks (already-completed ones included).
        0 means nothing matched and nothing changed.
        """
        matched = 0
        with self._lock:
            for i, task in enumerate(self._tasks):
                if task.title != title:
                    continue
                matched += 1
                self._tasks[i] = task.mark_completed()
        logger.debug("Task complete title=%r matched=%s", title, matched)
        return matched

    def delete_task(self, title: str) -> int:
        """Remove every task titled `title`. Returns how many were removed."""
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.title != title]
            removed = before - len(self._tasks)
        logger.debug("Task delete title=%r removed=%s", title, removed)
        return removed

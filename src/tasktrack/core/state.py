# src/tasktrack/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import BackgroundService, TaskRepo


@dataclass
class AppState:
    # Settings live on the state so commands can read them without importing config.
    settings: Any

    task_store: TaskRepo
    reporter: BackgroundService | None = None

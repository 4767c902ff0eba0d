# src/tasktrack/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the one TaskStore for the process and hands it to AppState,
- builds the background status reporter (not started here).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.status_reporter import StatusReporter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, task_store=TaskStore())


def build_status_reporter(settings) -> StatusReporter | None:
    """Reporter configured from settings, or None when disabled."""
    if not getattr(settings, "status_enabled", True):
        logger.info("Status reporter disabled, not starting.")
        return None

    return StatusReporter(
        interval_seconds=settings.status_interval_seconds,
        message=settings.status_message,
    )

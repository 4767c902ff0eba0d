# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, starts the status reporter in a
background thread, then runs the console menu in the main thread.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import build_status_reporter, create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        if state.reporter is not None:
            state.reporter.stop()
    except Exception:
        logger.exception("Failed to stop status reporter.")

    try:
        total = state.task_store.count_tasks()
        state.task_store.close()
        logger.info("Discarding %d in-memory task(s).", total)
    except Exception:
        logger.debug("Task store close failed.", exc_info=True)


def _handle_sigterm(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    raise SystemExit(0)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not in the main thread, or the platform has no SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        reporter = build_status_reporter(settings)
        if reporter is not None:
            state.reporter = reporter.start()

        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# src/tasktrack/tasks/status_reporter.py

from __future__ import annotations

"""
Background status reporter.

A periodic loop that sleeps for a fixed interval and then emits a status line.
It never touches the task store, so it needs no locking beyond its own
start/stop lifecycle.

The console REPL blocks on input(), so the loop gets its own event loop in a
daemon thread. Stopping cancels the coroutine from the calling thread, which
interrupts the sleep instead of waiting for the next tick.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from enum import StrEnum

logger = logging.getLogger(__name__)

DEFAULT_STATUS_MESSAGE = "Checking system status..."
DEFAULT_INTERVAL_SECONDS = 10.0

StatusCallback = Callable[[], None]


def log_status(message: str = DEFAULT_STATUS_MESSAGE) -> None:
    logger.info("[Background Task]: %s", message)


async def run_status_reporter(
        report: StatusCallback,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
) -> None:
    """
    Every interval_seconds: call report().

    A failing report is logged and the loop keeps going.
    To stop the reporter, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))

    while True:
        await asyncio.sleep(sleep_s)
        try:
            report()
        except Exception:
            logger.exception("status report failed")


class ReporterState(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class StatusReporter:
    """
    Thread-hosted handle around run_status_reporter.

    Lifecycle: IDLE -> RUNNING (start) -> STOPPED (stop). A reporter is
    single-use; stop() is idempotent and safe to call from shutdown paths.
    """

    def __init__(
        self,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        message: str = DEFAULT_STATUS_MESSAGE,
        report: StatusCallback | None = None,
    ) -> None:
        self.interval_seconds = float(interval_seconds)
        self.message = message
        self._report: StatusCallback = report or (lambda: log_status(self.message))

        self._lock = threading.Lock()
        self._state = ReporterState.IDLE
        self._thread: threading.Thread | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ReporterState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is ReporterState.RUNNING

    def start(self) -> StatusReporter:
        with self._lock:
            if self._state is not ReporterState.IDLE:
                raise RuntimeError(f"StatusReporter cannot start from state {self._state.value}")
            self._state = ReporterState.RUNNING

            ready = threading.Event()
            self._thread = threading.Thread(
                target=self._thread_main,
                args=(ready,),
                name="status-reporter",
                daemon=True,
            )
            self._thread.start()

        if not ready.wait(timeout=5.0):
            logger.error("Status reporter thread did not initialize in time.")
        logger.info("Status reporter started (interval=%.2fs).", self.interval_seconds)
        return self

    def stop(self, timeout: float | None = 5.0) -> None:
        with self._lock:
            if self._state is not ReporterState.RUNNING:
                return
            self._state = ReporterState.STOPPED
            loop, task, thread = self._loop, self._task, self._thread

        if loop is not None and task is not None:
            try:
                loop.call_soon_threadsafe(task.cancel)
            except RuntimeError:
                # Loop already closed: the thread has exited on its own.
                logger.debug("Status reporter loop already closed.", exc_info=True)

        if thread is not None:
            thread.join(timeout=timeout)
            if thread.is_alive():
                logger.warning("Status reporter thread did not stop within %ss.", timeout)

        logger.info("Status reporter stopped.")

    # ---- thread side ----

    def _thread_main(self, ready: threading.Event) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:
            loop.run_until_complete(self._serve(ready))
        except Exception:
            logger.exception("Status reporter crashed.")
        finally:
            ready.set()
            with contextlib.suppress(Exception):
                loop.close()

    async def _serve(self, ready: threading.Event) -> None:
        task = asyncio.create_task(
            run_status_reporter(self._report, interval_seconds=self.interval_seconds)
        )
        with self._lock:
            self._loop = asyncio.get_running_loop()
            self._task = task
            # stop() may have run before the loop existed.
            if self._state is ReporterState.STOPPED:
                task.cancel()
        ready.set()

        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("Status reporter loop exited.")

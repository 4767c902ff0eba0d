# tests/fakes.py

from __future__ import annotations

import threading
from collections.abc import Iterable


class ScriptedInput:
    """
    Stand-in for input() used by console tests.

    - Returns the scripted lines in order
    - Records every prompt shown
    - Raises EOFError once the script runs out (like Ctrl+D)
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


class CapturedOutput:
    """Stand-in for print() that keeps everything written."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class RecordingReport:
    """Status callback that counts calls and signals once `expected` calls happened."""

    def __init__(self, expected: int = 1, fail_first: int = 0) -> None:
        self.calls = 0
        self.expected = expected
        self.fail_first = fail_first
        self.reached = threading.Event()
        self._lock = threading.Lock()

    def __call__(self) -> None:
        with self._lock:
            self.calls += 1
            n = self.calls
        if n <= self.fail_first:
            raise RuntimeError("report failed")
        if n - self.fail_first >= self.expected:
            self.reached.set()

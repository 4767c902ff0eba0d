# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasktrack.config import DEFAULT_STATUS_INTERVAL, DEFAULT_STATUS_MESSAGE, Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_TO_FILE",
    "STATUS_ENABLED",
    "STATUS_INTERVAL",
    "STATUS_MESSAGE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(f"TASKTRACK_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "tasktrack"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/tasktrack")
    assert s.log_to_file is False
    assert s.status_enabled is True
    assert s.status_interval_seconds == DEFAULT_STATUS_INTERVAL == 10.0
    assert s.status_message == DEFAULT_STATUS_MESSAGE


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKTRACK_APP_NAME", "todo")
    monkeypatch.setenv("TASKTRACK_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKTRACK_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TASKTRACK_LOG_TO_FILE", "yes")
    monkeypatch.setenv("TASKTRACK_STATUS_ENABLED", "off")
    monkeypatch.setenv("TASKTRACK_STATUS_INTERVAL", "2.5")
    monkeypatch.setenv("TASKTRACK_STATUS_MESSAGE", "alive")

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_to_file is True
    assert s.status_enabled is False
    assert s.status_interval_seconds == 2.5
    assert s.status_message == "alive"


@pytest.mark.parametrize("raw", ["abc", "0", "-3", ""])
def test_bad_interval_falls_back_to_default(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("TASKTRACK_STATUS_INTERVAL", raw)
    assert Settings.from_env().status_interval_seconds == DEFAULT_STATUS_INTERVAL


def test_settings_are_frozen() -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.app_name = "other"  # type: ignore[misc]

# src/tasktrack/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Malformed values fall back to defaults; reading config never raises.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKTRACK"

DEFAULT_STATUS_INTERVAL = 10.0
DEFAULT_STATUS_MESSAGE = "Checking system status..."


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Background status reporter ----
    status_enabled: bool
    status_interval_seconds: float
    status_message: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasktrack").strip() or "tasktrack",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/tasktrack")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            status_enabled=_env_bool(_k("STATUS_ENABLED"), True),
            status_interval_seconds=_env_positive_float(
                _k("STATUS_INTERVAL"), DEFAULT_STATUS_INTERVAL
            ),
            status_message=_env(_k("STATUS_MESSAGE"), DEFAULT_STATUS_MESSAGE),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

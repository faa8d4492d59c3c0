# src/tidy_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Invalid numbers fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TIDY"

DEFAULT_MAX_TASK_LENGTH = 250
DEFAULT_FEEDBACK_SECONDS = 2.0

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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
    log_to_file: bool

    # ---- Console ----
    color: bool

    # ---- Task rules ----
    max_task_length: int
    feedback_seconds: float

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tidy").strip() or "tidy"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_FILE"), True)

        # NO_COLOR (https://no-color.org) wins over our own switch.
        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None

        max_task_length = _env_int(_k("MAX_TASK_LENGTH"), DEFAULT_MAX_TASK_LENGTH)
        if max_task_length <= 0:
            max_task_length = DEFAULT_MAX_TASK_LENGTH

        feedback_seconds = _env_float(_k("FEEDBACK_SECONDS"), DEFAULT_FEEDBACK_SECONDS)
        if feedback_seconds < 0:
            feedback_seconds = DEFAULT_FEEDBACK_SECONDS

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tidy"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            color=color,
            max_task_length=max_task_length,
            feedback_seconds=feedback_seconds,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for switches you flip often.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    if hasattr(_config_local, "COLOR"):
        object.__setattr__(SETTINGS, "color", bool(_config_local.COLOR))  # type: ignore[misc]
    if hasattr(_config_local, "LOG_LEVEL"):
        object.__setattr__(SETTINGS, "log_level", str(_config_local.LOG_LEVEL).upper())  # type: ignore[misc]


def get_settings() -> Settings:
    return SETTINGS

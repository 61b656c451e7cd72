# src/gauntlet/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is created on disk at import time (paths are only resolved).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .paths import default_data_dir

ENV_PREFIX = "GAUNTLET"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
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

    # ---- Local data paths ----
    data_dir: Path
    tasks_db_path: Path
    log_file: Path

    # ---- Scoring ----
    score_max_attempts: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "gauntlet").strip() or "gauntlet"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir(app_name))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.db")
        log_file = _env_path(_k("LOG_FILE"), data_dir / f"{app_name}.log")

        score_max_attempts = max(1, _env_int(_k("SCORE_MAX_ATTEMPTS"), 3))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            log_file=log_file,
            score_max_attempts=score_max_attempts,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

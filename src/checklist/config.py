# src/checklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Settings are injectable; nothing else reads the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "CHECKLIST"


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
    color: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_dir: Path
    log_dir: Path

    # ---- Persistence ----
    storage_key: str

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            # .env is looked up from the working directory, not from this file.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "checklist").strip() or "checklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        color = _env_bool(_k("COLOR"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/checklist"))
        storage_dir = _env_path(_k("STORAGE_DIR"), data_dir / "storage")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            color=color,
            data_dir=data_dir,
            storage_dir=storage_dir,
            log_dir=log_dir,
            storage_key=storage_key,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS

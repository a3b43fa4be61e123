# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Defaults reproduce the plain interactive behavior: ./tasks.json, "> " prompt.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
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
    log_dir: Path
    log_to_file: bool

    # ---- Storage ----
    data_file: Path

    # ---- Console ----
    prompt: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "tasklist") or "tasklist",
            log_level=_env(_k("LOG_LEVEL"), "ERROR"),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/tasklist")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_file=_env_path(_k("DATA_FILE"), Path("tasks.json")),
            # Prompt keeps its trailing space, so no strip here.
            prompt=_env(_k("PROMPT"), "> "),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

# src/todo_home/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Local, safe overrides may live in an untracked config_local.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO_HOME"

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

    # ---- Home page copy ----
    page_title: str
    page_heading: str
    page_text: str

    # ---- Local data (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    # ---- Persistence switches ----
    persistence_enabled: bool
    autosave: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-home")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        page_title = _env(_k("PAGE_TITLE"), "Хатняя старонка")
        page_heading = _env(_k("PAGE_HEADING"), "Хата")
        page_text = _env(_k("PAGE_TEXT"), "Гэта спiс.")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo_home"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")

        persistence_enabled = _env_bool(_k("PERSISTENCE"), True)
        # Autosave requires persistence.
        autosave = persistence_enabled and _env_bool(_k("AUTOSAVE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            page_title=page_title,
            page_heading=page_heading,
            page_text=page_text,
            data_dir=data_dir,
            tasks_path=tasks_path,
            persistence_enabled=persistence_enabled,
            autosave=autosave,
        )


def apply_local_overrides(settings: Settings, local: object | None) -> Settings:
    """
    Apply safe switches from a config_local module.

    Autosave stays off whenever persistence ends up disabled.
    """
    if local is None:
        return settings

    persistence_enabled = bool(getattr(local, "PERSISTENCE_ENABLED", settings.persistence_enabled))
    autosave = bool(getattr(local, "AUTOSAVE", settings.autosave))
    return replace(
        settings,
        persistence_enabled=persistence_enabled,
        autosave=persistence_enabled and autosave,
    )


# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for simple switches.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

SETTINGS = apply_local_overrides(Settings.from_env(), _config_local)


def get_settings() -> Settings:
    return SETTINGS

# src/sprintdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time.
- Stores and services receive values from Settings through the composition root,
  they never read the environment themselves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

ENV_PREFIX = "SPRINTDESK"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


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

    # ---- Front end ----
    console_enabled: bool

    # ---- Session (simulated backend) ----
    demo_password: str
    login_delay_seconds: float
    session_storage_key: str
    persist_session: bool

    # ---- Workspace ----
    activity_author: str

    # ---- Assistant / OpenRouter ----
    assistant_delay_seconds: float
    openrouter_api_key: Optional[str]
    openrouter_base_url: str
    llm_models: List[str]
    extra_headers: Dict[str, str]

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    session_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default=_env(_k("APP_TITLE"), "sprintdesk")) or "sprintdesk"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        demo_password = _env(_k("DEMO_PASSWORD"), "password")
        login_delay_seconds = max(0.0, _env_float(_k("LOGIN_DELAY_SECONDS"), 1.0))
        session_storage_key = _env(_k("SESSION_STORAGE_KEY"), "user") or "user"
        persist_session = _env_bool(_k("PERSIST_SESSION"), True)

        activity_author = _env(_k("ACTIVITY_AUTHOR"), "Current User") or "Current User"

        assistant_delay_seconds = max(0.0, _env_float(_k("ASSISTANT_DELAY_SECONDS"), 2.0))
        openrouter_api_key = _first_env(_k("OPENROUTER_API_KEY"), "OPENROUTER_API_KEY", default=None)
        openrouter_base_url = _env(_k("OPENROUTER_BASE_URL"), "https://openrouter.ai/api/v1")

        http_referer = _env(_k("HTTP_REFERER"), "https://example.com")
        title = _env(_k("APP_TITLE"), app_name)

        extra_headers = {
            "HTTP-Referer": http_referer,
            "X-Title": title,
        }

        llm_models = _env_list(
            _k("LLM_MODELS"),
            [
                "qwen/qwen-2.5-72b-instruct:free",
                "deepseek/deepseek-chat-v3-0324:free",
            ],
        )

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/sprintdesk"))
        session_path = _env_path(_k("SESSION_PATH"), data_dir / "session.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            demo_password=demo_password,
            login_delay_seconds=login_delay_seconds,
            session_storage_key=session_storage_key,
            persist_session=persist_session,
            activity_author=activity_author,
            assistant_delay_seconds=assistant_delay_seconds,
            openrouter_api_key=openrouter_api_key,
            openrouter_base_url=openrouter_base_url,
            llm_models=llm_models,
            extra_headers=extra_headers,
            data_dir=data_dir,
            session_path=session_path,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env for secrets; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "CONSOLE_ENABLED"):
        object.__setattr__(SETTINGS, "console_enabled", bool(_config_local.CONSOLE_ENABLED))  # type: ignore[misc]
    if hasattr(_config_local, "LOGIN_DELAY_SECONDS"):
        object.__setattr__(SETTINGS, "login_delay_seconds", float(_config_local.LOGIN_DELAY_SECONDS))  # type: ignore[misc]
    if hasattr(_config_local, "ASSISTANT_DELAY_SECONDS"):
        object.__setattr__(SETTINGS, "assistant_delay_seconds", float(_config_local.ASSISTANT_DELAY_SECONDS))  # type: ignore[misc]
except Exception:
    pass


def get_settings() -> Settings:
    return SETTINGS


# --------------------------------------------------------------------------------------
# Module-level constants (read-only views of SETTINGS).
# --------------------------------------------------------------------------------------

APP_NAME = SETTINGS.app_name
LOG_LEVEL = SETTINGS.log_level

CONSOLE_ENABLED = SETTINGS.console_enabled

DEMO_PASSWORD = SETTINGS.demo_password
LOGIN_DELAY_SECONDS = SETTINGS.login_delay_seconds
ASSISTANT_DELAY_SECONDS = SETTINGS.assistant_delay_seconds

OPENROUTER_API_KEY = SETTINGS.openrouter_api_key
OPENROUTER_BASE_URL = SETTINGS.openrouter_base_url
LLM_MODELS = SETTINGS.llm_models
EXTRA_HEADERS = SETTINGS.extra_headers

DATA_DIR = SETTINGS.data_dir
SESSION_PATH = SETTINGS.session_path

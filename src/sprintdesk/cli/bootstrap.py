# src/sprintdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (session storage, stores, assistant).
"""

from __future__ import annotations

import logging

from ..assistant.client import OpenRouterAssistantClient
from ..assistant.offline import OfflineAssistantClient
from ..assistant.service import AssistantService
from ..config import get_settings
from ..core.ports import AssistantClient, Delay, SessionStorage
from ..core.state import AppState
from ..session.storage import JsonFileSessionStorage, MemorySessionStorage
from ..session.store import SessionStore
from ..workspace.store import WorkspaceStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.session_path.parent.mkdir(parents=True, exist_ok=True)


def _make_assistant_client(settings) -> AssistantClient:
    try:
        return OpenRouterAssistantClient(settings)
    except RuntimeError as e:
        # Demos / local runs without external services use the canned replies.
        logger.info("Assistant: using offline replies (%s)", e)
        return OfflineAssistantClient()


def create_initial_state(
    *,
    settings=None,
    storage: SessionStorage | None = None,
    delay: Delay | None = None,
    assistant_client: AssistantClient | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the storage/delay/assistant ports) injectable makes the app
    easy to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        if getattr(settings, "persist_session", True):
            _ensure_local_dirs(settings)
            storage = JsonFileSessionStorage(settings.session_path)
        else:
            storage = MemorySessionStorage()

    session = SessionStore(
        storage,
        delay=delay,
        demo_password=settings.demo_password,
        delay_seconds=settings.login_delay_seconds,
        storage_key=settings.session_storage_key,
    )
    workspace = WorkspaceStore(activity_author=settings.activity_author)

    if assistant_client is None:
        assistant_client = _make_assistant_client(settings)

    assistant = AssistantService(
        workspace,
        assistant_client,
        delay=delay,
        delay_seconds=settings.assistant_delay_seconds,
    )

    return AppState(
        settings=settings,
        session=session,
        workspace=workspace,
        assistant=assistant,
    )

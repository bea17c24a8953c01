# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from sprintdesk.assistant.service import AssistantService
from sprintdesk.core.state import AppState
from sprintdesk.session.storage import MemorySessionStorage
from sprintdesk.session.store import SessionStore
from sprintdesk.workspace.store import WorkspaceStore

from .fakes import FakeAssistantClient, SequentialIds, no_delay

FIXED_NOW = datetime(2024, 1, 14, 12, 0, 0, tzinfo=UTC)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the stores.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="sprintdesk-test",
        data_dir=tmp_path,
        session_path=tmp_path / "session.json",
        persist_session=False,
        demo_password="password",
        login_delay_seconds=0.0,
        assistant_delay_seconds=0.0,
        session_storage_key="user",
        activity_author="Current User",
    )


@pytest.fixture()
def storage() -> MemorySessionStorage:
    return MemorySessionStorage()


@pytest.fixture()
def session(storage: MemorySessionStorage) -> SessionStore:
    return SessionStore(storage, delay=no_delay)


@pytest.fixture()
def workspace() -> WorkspaceStore:
    """Seeded store with a fixed clock and predictable ids (n1, n2, ...)."""
    return WorkspaceStore(clock=lambda: FIXED_NOW, id_factory=SequentialIds())


@pytest.fixture()
def fake_client() -> FakeAssistantClient:
    return FakeAssistantClient()


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    session: SessionStore,
    workspace: WorkspaceStore,
    fake_client: FakeAssistantClient,
) -> AppState:
    """AppState wired with zero delays and a deterministic assistant."""
    return AppState(
        settings=settings,
        session=session,
        workspace=workspace,
        assistant=AssistantService(
            workspace,
            fake_client,
            delay=no_delay,
            delay_seconds=0.0,
            clock=lambda: FIXED_NOW,
        ),
    )

# tests/test_session_store.py

from __future__ import annotations

import dataclasses
import json

import pytest

from sprintdesk.session.models import Role
from sprintdesk.session.storage import MemorySessionStorage
from sprintdesk.session.store import (
    ERR_BAD_CREDENTIALS,
    ERR_MISSING_CREDENTIALS,
    ERR_MISSING_EMAIL,
    ERR_UPDATE_PASSWORD,
    RESET_PASSWORD_MESSAGE,
    SessionStore,
)

from .fakes import EventRecorder, RecordingDelay, no_delay

STRONG = "Str0ng!pass"


@pytest.mark.asyncio
async def test_login_ok_sets_user_and_persists(session, storage) -> None:
    assert not session.is_authenticated
    assert not session.is_loading

    ok = await session.login("admin@example.com", "password")

    assert ok is True
    assert session.is_authenticated
    assert session.error is None
    assert session.user is not None
    assert session.user.role is Role.ADMIN
    persisted = json.loads(storage.get("user"))
    assert persisted["email"] == "admin@example.com"
    assert persisted["isFirstLogin"] is False


@pytest.mark.asyncio
async def test_login_email_is_case_insensitive(session) -> None:
    assert await session.login("  Scrum@Example.com ", "password")
    assert session.user.name == "Sarah Scrum"


@pytest.mark.asyncio
async def test_login_bad_credentials_keeps_previous_state(session, storage) -> None:
    assert not await session.login("admin@example.com", "nope")
    assert session.error == ERR_BAD_CREDENTIALS
    assert session.user is None
    assert storage.get("user") is None

    assert not await session.login("ghost@example.com", "password")
    assert session.error == ERR_BAD_CREDENTIALS
    assert not session.is_loading


@pytest.mark.asyncio
async def test_login_missing_fields_fails_without_delay(storage) -> None:
    delay = RecordingDelay()
    s = SessionStore(storage, delay=delay, delay_seconds=1.0)

    assert not await s.login("", "password")
    assert s.error == ERR_MISSING_CREDENTIALS
    assert not await s.login("admin@example.com", "")
    assert delay.calls == []

    assert await s.login("admin@example.com", "password")
    assert delay.calls == [1.0]


@pytest.mark.asyncio
async def test_login_notifies_loading_then_login(session) -> None:
    rec = EventRecorder()
    session.subscribe(rec)

    await session.login("admin@example.com", "password")

    assert rec.kinds == ["session.loading", "session.login", "session.loading"]
    assert rec.events[1].entity_id == "1"


@pytest.mark.asyncio
async def test_logout_clears_user_and_persisted_slot(session, storage) -> None:
    await session.login("admin@example.com", "password")
    session.logout()

    assert session.user is None
    assert not session.is_authenticated
    assert "user" not in storage


@pytest.mark.asyncio
async def test_reset_password_known_and_unknown() -> None:
    s = SessionStore(MemorySessionStorage(), delay=no_delay)

    unknown = await s.reset_password("unknown@x.com")
    known = await s.reset_password("admin@example.com")

    assert unknown.ok is False
    assert known.ok is True
    # Same message either way; the unknown case is not reported as an error.
    assert unknown.message == known.message == RESET_PASSWORD_MESSAGE
    assert s.error is None


@pytest.mark.asyncio
async def test_reset_password_requires_email(session) -> None:
    result = await session.reset_password("   ")
    assert result.ok is False
    assert session.error == ERR_MISSING_EMAIL


@pytest.mark.asyncio
async def test_first_login_flow_clears_flag(session, storage) -> None:
    await session.login("dev@example.com", "password")
    assert session.user.is_first_login is True

    assert not await session.update_password("short", "short")
    assert session.error == "Password must be at least 8 characters long"
    assert session.user.is_first_login is True

    assert not await session.update_password(STRONG, STRONG + "x")
    assert session.error == "Passwords do not match"

    assert await session.update_password(STRONG, STRONG)
    assert session.error is None
    assert session.user.is_first_login is False
    assert json.loads(storage.get("user"))["isFirstLogin"] is False


@pytest.mark.asyncio
async def test_update_password_without_user_fails(session) -> None:
    assert not await session.update_password(STRONG)
    assert session.error == ERR_UPDATE_PASSWORD


@pytest.mark.asyncio
async def test_update_profile_merges_fields(session, storage) -> None:
    assert session.update_profile(name="Nobody") is False

    await session.login("admin@example.com", "password")
    assert session.update_profile(name="Johnny", role="scrum master")

    assert session.user.name == "Johnny"
    assert session.user.role is Role.SCRUM_MASTER
    assert json.loads(storage.get("user"))["name"] == "Johnny"

    with pytest.raises(ValueError):
        session.update_profile(id="99")
    with pytest.raises(ValueError):
        session.update_profile(nickname="x")


@pytest.mark.asyncio
async def test_user_property_returns_copy(session) -> None:
    await session.login("admin@example.com", "password")
    u = session.user
    u.workspaces.append("workspace-x")
    assert "workspace-x" not in session.user.workspaces
    with pytest.raises(dataclasses.FrozenInstanceError):
        u.role = Role.DEVELOPER
    assert session.user.role is Role.ADMIN


def test_restores_persisted_user_on_construction() -> None:
    record = {
        "id": "2",
        "email": "scrum@example.com",
        "name": "Sarah Scrum",
        "role": "Scrum Master",
        "isFirstLogin": False,
        "workspaces": ["workspace-1"],
    }
    storage = MemorySessionStorage({"user": json.dumps(record)})

    s = SessionStore(storage, delay=no_delay)

    assert s.is_authenticated
    assert s.user.role is Role.SCRUM_MASTER
    assert not s.is_loading


def test_corrupt_persisted_user_is_discarded() -> None:
    storage = MemorySessionStorage({"user": "{not json"})
    s = SessionStore(storage, delay=no_delay)
    assert s.user is None
    assert "user" not in storage

    storage2 = MemorySessionStorage({"user": json.dumps({"id": "1"})})
    s2 = SessionStore(storage2, delay=no_delay)
    assert s2.user is None
    assert "user" not in storage2


@pytest.mark.asyncio
async def test_clear_error_and_input_changed(session) -> None:
    await session.login("admin@example.com", "bad")
    assert session.error is not None

    rec = EventRecorder()
    session.subscribe(rec)
    session.input_changed()
    assert session.error is None
    assert rec.kinds == ["session.error"]

    session.clear_error()
    assert rec.kinds == ["session.error"]

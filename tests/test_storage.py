# tests/test_storage.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sprintdesk.session.storage import JsonFileSessionStorage
from sprintdesk.session.store import SessionStore

from .fakes import no_delay


def test_json_storage_set_get_remove(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "session.json"
    s = JsonFileSessionStorage(path)

    assert s.get("user") is None
    s.set("user", '{"id": "1"}')
    s.set("theme", "dark")

    assert s.get("user") == '{"id": "1"}'
    assert json.loads(path.read_text("utf-8")) == {"user": '{"id": "1"}', "theme": "dark"}

    s.remove("user")
    assert s.get("user") is None
    assert s.get("theme") == "dark"

    s.remove("theme")
    assert not path.exists()
    s.remove("theme")


def test_json_storage_unreadable_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("[1, 2", "utf-8")
    assert JsonFileSessionStorage(path).get("user") is None

    path.write_text("[1, 2]", "utf-8")
    assert JsonFileSessionStorage(path).get("user") is None


@pytest.mark.asyncio
async def test_session_survives_restart_with_file_storage(tmp_path: Path) -> None:
    path = tmp_path / "session.json"

    first = SessionStore(JsonFileSessionStorage(path), delay=no_delay)
    assert await first.login("scrum@example.com", "password")

    second = SessionStore(JsonFileSessionStorage(path), delay=no_delay)
    assert second.user == first.user

    second.logout()
    third = SessionStore(JsonFileSessionStorage(path), delay=no_delay)
    assert third.user is None

# tests/test_commitments.py

from __future__ import annotations

from datetime import date

import pytest

from sprintdesk.session.directory import UserDirectory
from sprintdesk.workspace.commitments import can_manage_commitments, days_remaining, toggle_commitment
from sprintdesk.workspace.models import TaskStatus


def _user(email: str):
    return UserDirectory().find_by_email(email)


def test_only_managers_can_manage() -> None:
    assert can_manage_commitments(_user("admin@example.com"))
    assert can_manage_commitments(_user("scrum@example.com"))
    assert not can_manage_commitments(_user("dev@example.com"))
    assert not can_manage_commitments(None)


def test_toggle_flips_done_and_in_progress(workspace) -> None:
    admin = _user("admin@example.com")

    assert toggle_commitment(workspace, admin, "3")
    assert workspace.get_task("3").status is TaskStatus.IN_PROGRESS

    assert toggle_commitment(workspace, admin, "3")
    assert workspace.get_task("3").status is TaskStatus.DONE

    # Anything that is not Done becomes Done.
    assert toggle_commitment(workspace, admin, "2")
    assert workspace.get_task("2").status is TaskStatus.DONE

    assert not toggle_commitment(workspace, admin, "missing")


def test_toggle_denied_for_developer(workspace) -> None:
    with pytest.raises(PermissionError):
        toggle_commitment(workspace, _user("dev@example.com"), "3")
    assert workspace.get_task("3").status is TaskStatus.DONE


def test_days_remaining() -> None:
    today = date(2024, 1, 14)
    assert days_remaining("2024-01-20", today) == 6
    assert days_remaining("2024-01-12", today) == -2
    assert days_remaining("", today) is None
    assert days_remaining("soon", today) is None

# tests/test_search.py

from __future__ import annotations

from sprintdesk.workspace.search import (
    UNASSIGNED,
    filter_tasks,
    resolve_assignee_name,
    search_members,
    search_tasks,
)


def test_search_by_assignee_name_only(workspace) -> None:
    # "Mike" appears in no title/description, only as member 3's name.
    found = search_tasks(workspace, "mike")
    expected = [t.id for t in workspace.workspace_tasks() if t.assignee_id == "3"]

    assert [t.id for t in found] == expected
    assert set(expected) == {"2", "3"}


def test_search_is_scoped_to_current_workspace(workspace) -> None:
    workspace.add_task(title="Mike's other task", workspace_id="workspace-2", assignee_id="3")

    assert {t.id for t in search_tasks(workspace, "mike")} == {"2", "3"}

    workspace.set_current_workspace("workspace-2")
    assert [t.title for t in search_tasks(workspace, "mike")] == ["Mike's other task"]


def test_search_matches_title_and_description_case_insensitively(workspace) -> None:
    assert [t.id for t in search_tasks(workspace, "WIREFRAMES")] == ["1"]
    assert [t.id for t in search_tasks(workspace, "jwt")] == ["2"]


def test_empty_term_returns_all_workspace_tasks(workspace) -> None:
    assert len(search_tasks(workspace, "")) == 3


def test_unassigned_label_is_not_searchable(workspace) -> None:
    workspace.update_task("1", assignee_id="")
    assert filter_tasks(workspace.tasks, workspace.team_members, "unassigned") == []
    assert resolve_assignee_name(workspace.team_members, "") == UNASSIGNED


def test_search_members_by_name_or_email(workspace) -> None:
    assert [m.id for m in search_members(workspace.team_members, "lisa")] == ["4"]
    assert [m.id for m in search_members(workspace.team_members, "SCRUM@")] == ["2"]
    assert search_members(workspace.team_members, "zzz") == []

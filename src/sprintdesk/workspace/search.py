# src/sprintdesk/workspace/search.py

from __future__ import annotations

from collections.abc import Iterable

from .models import Task, TeamMember
from .store import WorkspaceStore

UNASSIGNED = "Unassigned"


def find_member(members: Iterable[TeamMember], member_id: str | None) -> TeamMember | None:
    if not member_id:
        return None
    return next((m for m in members if m.id == member_id), None)


def resolve_assignee_name(members: Iterable[TeamMember], assignee_id: str | None) -> str:
    """Display name for an assignee reference; missing or removed members show as Unassigned."""
    member = find_member(members, assignee_id)
    return member.name if member is not None else UNASSIGNED


def _contains(haystack: str | None, needle: str) -> bool:
    return needle in (haystack or "").lower()


def filter_tasks(tasks: Iterable[Task], members: Iterable[TeamMember], term: str) -> list[Task]:
    """
    Case-insensitive substring match over title, description and assignee name.

    Only a real member name is searched; the "Unassigned" fallback is display-only.
    """
    needle = (term or "").lower()
    names = {m.id: m.name for m in members}
    out: list[Task] = []
    for t in tasks:
        if (
            _contains(t.title, needle)
            or _contains(t.description, needle)
            or (t.assignee_id in names and _contains(names[t.assignee_id], needle))
        ):
            out.append(t)
    return out


def search_tasks(store: WorkspaceStore, term: str) -> list[Task]:
    """Tasks of the current workspace matching `term`."""
    return filter_tasks(store.workspace_tasks(), store.team_members, term)


def search_members(members: Iterable[TeamMember], term: str) -> list[TeamMember]:
    needle = (term or "").lower()
    return [m for m in members if _contains(m.name, needle) or _contains(m.email, needle)]

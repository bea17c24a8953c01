# src/sprintdesk/session/directory.py

"""Fixed identity directory used by the simulated authentication backend."""

from __future__ import annotations

from dataclasses import replace

from .models import Role, User

_SEED_USERS: tuple[User, ...] = (
    User(
        id="1",
        email="admin@example.com",
        name="John Admin",
        role=Role.ADMIN,
        is_first_login=False,
        workspaces=["workspace-1", "workspace-2"],
    ),
    User(
        id="2",
        email="scrum@example.com",
        name="Sarah Scrum",
        role=Role.SCRUM_MASTER,
        is_first_login=False,
        workspaces=["workspace-1"],
    ),
    User(
        id="3",
        email="dev@example.com",
        name="Mike Developer",
        role=Role.DEVELOPER,
        is_first_login=True,
        workspaces=["workspace-1"],
    ),
)


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class UserDirectory:
    """Read-only lookup over a list of users. Returned users are copies."""

    def __init__(self, users: list[User] | None = None) -> None:
        source = _SEED_USERS if users is None else users
        self._by_email = {_normalize_email(u.email): u for u in source}

    def find_by_email(self, email: str) -> User | None:
        user = self._by_email.get(_normalize_email(email))
        if user is None:
            return None
        return replace(user, workspaces=list(user.workspaces))

    def __contains__(self, email: object) -> bool:
        return isinstance(email, str) and _normalize_email(email) in self._by_email

    def __len__(self) -> int:
        return len(self._by_email)

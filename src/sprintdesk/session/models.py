# src/sprintdesk/session/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Role(StrEnum):
    ADMIN = "Admin"
    SCRUM_MASTER = "Scrum Master"
    DEVELOPER = "Developer"
    TESTER = "Tester"

    @classmethod
    def parse(cls, raw: str | Role) -> Role:
        """Accept the display value or the member name (case-insensitive)."""
        if isinstance(raw, Role):
            return raw
        s = str(raw).strip()
        for r in cls:
            if s.lower() in (r.value.lower(), r.name.lower()):
                return r
        raise ValueError(f"Unknown role: {raw!r}")


@dataclass(frozen=True, slots=True)
class User:
    id: str
    email: str
    name: str
    role: Role
    is_first_login: bool = False
    workspaces: list[str] = field(default_factory=list)

    @property
    def is_manager(self) -> bool:
        """Admins and Scrum Masters manage the team and commitments."""
        return self.role in (Role.ADMIN, Role.SCRUM_MASTER)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "isFirstLogin": self.is_first_login,
            "workspaces": list(self.workspaces),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """Build a User from its persisted form. Raises KeyError/ValueError on bad input."""
        workspaces = data.get("workspaces") or []
        if not isinstance(workspaces, list):
            raise ValueError("workspaces must be a list")
        return cls(
            id=str(data["id"]),
            email=str(data["email"]),
            name=str(data["name"]),
            role=Role.parse(data["role"]),
            is_first_login=bool(data.get("isFirstLogin", False)),
            workspaces=[str(w) for w in workspaces],
        )


@dataclass(frozen=True, slots=True)
class ResetPasswordResult:
    ok: bool
    message: str

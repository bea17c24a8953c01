# src/sprintdesk/workspace/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..session.models import Role


class TaskStatus(StrEnum):
    """
    Board column a task sits in.

    Any status is reachable from any other; the board does not enforce
    a transition graph.
    """

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    QA = "QA"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        """Accept the display value or a loose spelling (todo, in_progress, ...)."""
        if isinstance(raw, TaskStatus):
            return raw
        s = str(raw).strip()
        key = s.lower().replace("_", " ").replace("-", " ")
        for st in cls:
            if key in (st.value.lower(), st.name.lower().replace("_", " ")):
                return st
        raise ValueError(f"Unknown task status: {raw!r}")

    @classmethod
    def try_parse(cls, raw: str | None) -> TaskStatus | None:
        if raw is None:
            return None
        try:
            return cls.parse(raw)
        except ValueError:
            return None


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        if isinstance(raw, Priority):
            return raw
        s = str(raw).strip().lower()
        for p in cls:
            if s == p.value.lower():
                return p
        raise ValueError(f"Unknown priority: {raw!r}")


class MemberStatus(StrEnum):
    ACTIVE = "Active"
    PENDING = "Pending"
    INACTIVE = "Inactive"

    @classmethod
    def parse(cls, raw: str | MemberStatus) -> MemberStatus:
        if isinstance(raw, MemberStatus):
            return raw
        s = str(raw).strip().lower()
        for m in cls:
            if s == m.value.lower():
                return m
        raise ValueError(f"Unknown member status: {raw!r}")


class NotificationType(StrEnum):
    MENTION = "mention"
    ASSIGNMENT = "assignment"
    DUE_SOON = "due_soon"
    STATUS_CHANGE = "status_change"


@dataclass(frozen=True, slots=True)
class Subtask:
    id: str
    title: str
    completed: bool = False


@dataclass(frozen=True, slots=True)
class LastActivity:
    user: str
    action: str
    timestamp: str


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    status: TaskStatus
    priority: Priority
    # Lookup key into the team member list; may be empty or point at a removed member.
    assignee_id: str
    due_date: str
    workspace_id: str
    subtasks: list[Subtask] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""
    last_activity: LastActivity | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    id: str
    name: str
    description: str
    is_active: bool = True
    member_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TeamMember:
    id: str
    name: str
    email: str
    role: Role
    status: MemberStatus
    joined_at: str


@dataclass(frozen=True, slots=True)
class Notification:
    id: str
    type: NotificationType
    title: str
    message: str
    read: bool
    created_at: str
    task_id: str | None = None


@dataclass(frozen=True, slots=True)
class Activity:
    id: str
    message: str
    author: str
    timestamp: str
    kind: str = "custom"


@dataclass(frozen=True, slots=True)
class Meeting:
    id: str
    title: str
    date: str
    time: str
    description: str = ""
    link: str | None = None


@dataclass(frozen=True, slots=True)
class WorkspaceMetrics:
    active_workspaces: int
    total_workspaces: int
    completed_tasks: int
    in_progress_tasks: int
    team_members: int

# src/sprintdesk/workspace/seed.py

"""Demo data the workspace store starts with. Every call returns fresh objects."""

from __future__ import annotations

from ..session.models import Role
from .models import (
    Activity,
    Meeting,
    MemberStatus,
    Notification,
    NotificationType,
    Priority,
    Subtask,
    Task,
    TaskStatus,
    TeamMember,
    Workspace,
)

DEFAULT_WORKSPACE_ID = "workspace-1"


def seed_workspaces() -> list[Workspace]:
    return [
        Workspace(
            id="workspace-1",
            name="Mobile App Development",
            description="iOS and Android app development project",
            is_active=True,
            member_ids=["1", "2", "3"],
        ),
        Workspace(
            id="workspace-2",
            name="Web Platform",
            description="Main web application platform",
            is_active=True,
            member_ids=["1", "4"],
        ),
    ]


def seed_tasks() -> list[Task]:
    return [
        Task(
            id="1",
            title="Design user authentication flow",
            description="Create wireframes and mockups for the login and registration process",
            status=TaskStatus.IN_PROGRESS,
            priority=Priority.HIGH,
            assignee_id="2",
            due_date="2024-01-15",
            workspace_id="workspace-1",
            subtasks=[
                Subtask(id="1-1", title="Create wireframes", completed=True),
                Subtask(id="1-2", title="Design mockups", completed=False),
                Subtask(id="1-3", title="Review with team", completed=False),
            ],
            created_at="2024-01-08T10:00:00+00:00",
            updated_at="2024-01-10T14:30:00+00:00",
        ),
        Task(
            id="2",
            title="Implement API authentication",
            description="Set up JWT token-based authentication for the backend API",
            status=TaskStatus.TODO,
            priority=Priority.HIGH,
            assignee_id="3",
            due_date="2024-01-20",
            workspace_id="workspace-1",
            subtasks=[],
            created_at="2024-01-09T09:15:00+00:00",
            updated_at="2024-01-09T09:15:00+00:00",
        ),
        Task(
            id="3",
            title="Unit tests for user service",
            description="Write comprehensive unit tests for user management functionality",
            status=TaskStatus.DONE,
            priority=Priority.MEDIUM,
            assignee_id="3",
            due_date="2024-01-12",
            workspace_id="workspace-1",
            subtasks=[
                Subtask(id="3-1", title="Test user creation", completed=True),
                Subtask(id="3-2", title="Test user validation", completed=True),
            ],
            created_at="2024-01-05T11:20:00+00:00",
            updated_at="2024-01-12T16:45:00+00:00",
        ),
    ]


def seed_team_members() -> list[TeamMember]:
    return [
        TeamMember(
            id="1",
            name="John Admin",
            email="admin@example.com",
            role=Role.ADMIN,
            status=MemberStatus.ACTIVE,
            joined_at="2023-12-01T00:00:00+00:00",
        ),
        TeamMember(
            id="2",
            name="Sarah Scrum",
            email="scrum@example.com",
            role=Role.SCRUM_MASTER,
            status=MemberStatus.ACTIVE,
            joined_at="2023-12-15T00:00:00+00:00",
        ),
        TeamMember(
            id="3",
            name="Mike Developer",
            email="dev@example.com",
            role=Role.DEVELOPER,
            status=MemberStatus.ACTIVE,
            joined_at="2024-01-02T00:00:00+00:00",
        ),
        TeamMember(
            id="4",
            name="Lisa Tester",
            email="tester@example.com",
            role=Role.TESTER,
            status=MemberStatus.PENDING,
            joined_at="2024-01-10T00:00:00+00:00",
        ),
    ]


def seed_notifications() -> list[Notification]:
    return [
        Notification(
            id="1",
            type=NotificationType.ASSIGNMENT,
            title="New task assigned",
            message='You have been assigned to "Design user authentication flow"',
            read=False,
            created_at="2024-01-10T14:30:00+00:00",
            task_id="1",
        ),
        Notification(
            id="2",
            type=NotificationType.DUE_SOON,
            title="Task due soon",
            message='Task "Implement API authentication" is due in 2 days',
            read=False,
            created_at="2024-01-10T09:00:00+00:00",
            task_id="2",
        ),
    ]


def seed_activities() -> list[Activity]:
    # Newest first.
    return [
        Activity(
            id="2",
            kind="task_completed",
            message='Completed task "Unit tests for user service"',
            author="Mike Developer",
            timestamp="2024-01-12T16:45:00+00:00",
        ),
        Activity(
            id="1",
            kind="task_created",
            message='Created task "Design user authentication flow"',
            author="Sarah Scrum",
            timestamp="2024-01-08T10:00:00+00:00",
        ),
    ]


def seed_meetings() -> list[Meeting]:
    return [
        Meeting(
            id="1",
            title="Daily Standup",
            date="2024-01-15",
            time="09:00",
            description="Daily team sync meeting",
            link="https://meet.google.com/abc-defg-hij",
        ),
        Meeting(
            id="2",
            title="Sprint Planning",
            date="2024-01-16",
            time="14:00",
            description="Plan tasks for next sprint",
        ),
    ]

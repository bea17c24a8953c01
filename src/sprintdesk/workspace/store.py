# src/sprintdesk/workspace/store.py

"""
Workspace/task state container.

Owns six collections (workspaces, tasks, team members, notifications,
activity log, meetings) plus the current-workspace pointer.

Key invariants:
- mutations are synchronous and visible immediately; subscribers are notified
  after the change is applied,
- records are frozen dataclasses replaced via dataclasses.replace, so a
  snapshot a subscriber holds does not change under it,
- a task always has exactly one workspace id and one of the four statuses,
- references (task.assignee_id, notification.task_id) are lookup keys only:
  deleting a member or a task never touches other records.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, date, datetime
from typing import Any

from ..core.observable import Observable
from ..core.ports import Clock, IdFactory
from ..session.models import Role
from . import seed
from .models import (
    Activity,
    LastActivity,
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
    WorkspaceMetrics,
)

logger = logging.getLogger(__name__)

UNKNOWN_ACTOR = "Unknown User"

_TASK_MUTABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "status",
        "priority",
        "assignee_id",
        "due_date",
        "workspace_id",
        "subtasks",
        "last_activity",
    }
)
_MEMBER_MUTABLE_FIELDS = frozenset({"name", "email", "role", "status"})


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _short_id() -> str:
    return uuid.uuid4().hex[:12]


class WorkspaceStore(Observable):
    def __init__(
        self,
        *,
        workspaces: Iterable[Workspace] | None = None,
        tasks: Iterable[Task] | None = None,
        members: Iterable[TeamMember] | None = None,
        notifications: Iterable[Notification] | None = None,
        activities: Iterable[Activity] | None = None,
        meetings: Iterable[Meeting] | None = None,
        current_workspace: str | None = None,
        clock: Clock | None = None,
        id_factory: IdFactory | None = None,
        activity_author: str = "Current User",
    ) -> None:
        super().__init__()
        self._workspaces = list(workspaces) if workspaces is not None else seed.seed_workspaces()
        self._tasks = list(tasks) if tasks is not None else seed.seed_tasks()
        self._members = list(members) if members is not None else seed.seed_team_members()
        self._notifications = (
            list(notifications) if notifications is not None else seed.seed_notifications()
        )
        self._activities = list(activities) if activities is not None else seed.seed_activities()
        self._meetings = list(meetings) if meetings is not None else seed.seed_meetings()

        if current_workspace is None:
            current_workspace = self._workspaces[0].id if self._workspaces else ""
        self._current_workspace = current_workspace

        self._clock: Clock = clock if clock is not None else _utc_now
        self._new_id: IdFactory = id_factory if id_factory is not None else _short_id
        self._activity_author = activity_author

        logger.info(
            "WorkspaceStore ready workspaces=%d tasks=%d members=%d current=%s",
            len(self._workspaces),
            len(self._tasks),
            len(self._members),
            self._current_workspace,
        )

    # ---- helpers ----

    def _now_iso(self) -> str:
        return self._clock().isoformat(timespec="seconds")

    def _task_index(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _member_index(self, member_id: str) -> int | None:
        for i, m in enumerate(self._members):
            if m.id == member_id:
                return i
        return None

    @staticmethod
    def _coerce_task_changes(changes: dict[str, Any]) -> dict[str, Any]:
        unknown = set(changes) - _TASK_MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update task fields: {', '.join(sorted(unknown))}")

        out = dict(changes)
        if "status" in out:
            out["status"] = TaskStatus.parse(out["status"])
        if "priority" in out:
            out["priority"] = Priority.parse(out["priority"])
        if "title" in out and not str(out["title"] or "").strip():
            raise ValueError("title is required")
        if "workspace_id" in out and not str(out["workspace_id"] or "").strip():
            raise ValueError("workspace_id is required")
        if "assignee_id" in out:
            out["assignee_id"] = str(out["assignee_id"] or "")
        if "subtasks" in out:
            out["subtasks"] = [replace(st) for st in (out["subtasks"] or [])]
        return out

    # ---- read accessors ----

    @property
    def current_workspace(self) -> str:
        return self._current_workspace

    @property
    def workspaces(self) -> list[Workspace]:
        return list(self._workspaces)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def team_members(self) -> list[TeamMember]:
        return list(self._members)

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def activities(self) -> list[Activity]:
        return list(self._activities)

    @property
    def meetings(self) -> list[Meeting]:
        return list(self._meetings)

    @property
    def activity_author(self) -> str:
        return self._activity_author

    def get_task(self, task_id: str) -> Task | None:
        idx = self._task_index(task_id)
        return self._tasks[idx] if idx is not None else None

    def get_workspace(self, workspace_id: str) -> Workspace | None:
        return next((w for w in self._workspaces if w.id == workspace_id), None)

    def get_member(self, member_id: str) -> TeamMember | None:
        idx = self._member_index(member_id)
        return self._members[idx] if idx is not None else None

    def current_workspace_record(self) -> Workspace | None:
        return self.get_workspace(self._current_workspace)

    def workspace_tasks(self, workspace_id: str | None = None) -> list[Task]:
        ws = self._current_workspace if workspace_id is None else workspace_id
        return [t for t in self._tasks if t.workspace_id == ws]

    def unread_count(self) -> int:
        return sum(1 for n in self._notifications if not n.read)

    def upcoming_meetings(self, today: date | str | None = None, limit: int = 5) -> list[Meeting]:
        """Meetings on or after `today`, soonest first."""
        if today is None:
            today = self._clock().date()
        day = today.isoformat() if isinstance(today, date) else str(today)
        items = [m for m in self._meetings if m.date >= day]
        items.sort(key=lambda m: (m.date, m.time))
        return items[: max(0, int(limit))]

    # ---- workspaces ----

    def set_current_workspace(self, workspace_id: str) -> None:
        if self.get_workspace(workspace_id) is None:
            logger.warning("Switching to unknown workspace id=%s", workspace_id)
        self._current_workspace = workspace_id
        self._notify("workspace.current", workspace_id)

    def add_workspace(
        self,
        *,
        name: str,
        description: str = "",
        is_active: bool = True,
        member_ids: Iterable[str] | None = None,
    ) -> Workspace:
        if not name or not name.strip():
            raise ValueError("name is required")

        ws = Workspace(
            id=f"workspace-{self._new_id()}",
            name=name.strip(),
            description=(description or "").strip(),
            is_active=bool(is_active),
            member_ids=list(member_ids or []),
        )
        self._workspaces = [*self._workspaces, ws]
        self._current_workspace = ws.id
        logger.info("Workspace added id=%s name=%s", ws.id, ws.name)
        self._notify("workspace.added", ws.id)
        return ws

    # ---- tasks ----

    def add_task(
        self,
        *,
        title: str,
        description: str = "",
        status: TaskStatus | str = TaskStatus.TODO,
        priority: Priority | str = Priority.MEDIUM,
        assignee_id: str = "",
        due_date: str = "",
        workspace_id: str | None = None,
        subtasks: Iterable[Subtask] | None = None,
    ) -> Task:
        if not title or not title.strip():
            raise ValueError("title is required")
        ws = workspace_id if workspace_id is not None else self._current_workspace
        if not ws:
            raise ValueError("workspace_id is required")

        now = self._now_iso()
        task = Task(
            id=self._new_id(),
            title=title.strip(),
            description=(description or "").strip(),
            status=TaskStatus.parse(status),
            priority=Priority.parse(priority),
            assignee_id=str(assignee_id or ""),
            due_date=str(due_date or ""),
            workspace_id=ws,
            subtasks=[replace(st) for st in (subtasks or [])],
            created_at=now,
            updated_at=now,
        )
        self._tasks = [*self._tasks, task]
        logger.debug("Task added id=%s ws=%s status=%s", task.id, ws, task.status.value)
        self._notify("task.added", task.id)
        return task

    def update_task(self, task_id: str, **changes: Any) -> bool:
        """Merge `changes` into the task. Returns False for an unknown id."""
        coerced = self._coerce_task_changes(changes)
        idx = self._task_index(task_id)
        if idx is None:
            logger.debug("update_task: unknown id=%s", task_id)
            return False

        updated = replace(self._tasks[idx], **coerced, updated_at=self._now_iso())
        self._tasks = [*self._tasks[:idx], updated, *self._tasks[idx + 1 :]]
        self._notify("task.updated", task_id)
        return True

    def delete_task(self, task_id: str) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            return False
        logger.debug("Task deleted id=%s", task_id)
        self._notify("task.deleted", task_id)
        return True

    def move_task(self, task_id: str, status: TaskStatus | str, actor: str | None) -> bool:
        """
        Board drag-and-drop transition: change status and stamp last_activity.

        Returns False (and changes nothing) when the task is unknown or already
        has the target status.
        """
        new_status = TaskStatus.parse(status)
        task = self.get_task(task_id)
        if task is None or task.status == new_status:
            return False

        stamp = LastActivity(
            user=actor or UNKNOWN_ACTOR,
            action=f"moved from {task.status.value} to {new_status.value}",
            timestamp=self._now_iso(),
        )
        logger.info("Task %s %s by %s", task_id, stamp.action, stamp.user)
        return self.update_task(task_id, status=new_status, last_activity=stamp)

    # ---- subtasks ----

    def add_subtask(self, task_id: str, title: str) -> Subtask | None:
        if not title or not title.strip():
            raise ValueError("title is required")
        task = self.get_task(task_id)
        if task is None:
            return None
        sub = Subtask(id=f"{task_id}-{self._new_id()}", title=title.strip(), completed=False)
        self.update_task(task_id, subtasks=[*task.subtasks, sub])
        return sub

    def toggle_subtask(self, task_id: str, subtask_id: str) -> bool:
        task = self.get_task(task_id)
        if task is None or not any(st.id == subtask_id for st in task.subtasks):
            return False
        subtasks = [
            replace(st, completed=not st.completed) if st.id == subtask_id else st
            for st in task.subtasks
        ]
        return self.update_task(task_id, subtasks=subtasks)

    def remove_subtask(self, task_id: str, subtask_id: str) -> bool:
        task = self.get_task(task_id)
        if task is None:
            return False
        subtasks = [st for st in task.subtasks if st.id != subtask_id]
        if len(subtasks) == len(task.subtasks):
            return False
        return self.update_task(task_id, subtasks=subtasks)

    # ---- team members ----

    def add_team_member(
        self,
        *,
        name: str,
        email: str,
        role: Role | str,
        status: MemberStatus | str = MemberStatus.ACTIVE,
    ) -> TeamMember:
        if not name or not name.strip():
            raise ValueError("name is required")
        if not email or not email.strip():
            raise ValueError("email is required")

        member = TeamMember(
            id=self._new_id(),
            name=name.strip(),
            email=email.strip(),
            role=Role.parse(role),
            status=MemberStatus.parse(status),
            joined_at=self._now_iso(),
        )
        self._members = [*self._members, member]
        logger.info("Team member added id=%s email=%s", member.id, member.email)
        self._notify("member.added", member.id)
        return member

    def update_team_member(self, member_id: str, **changes: Any) -> bool:
        unknown = set(changes) - _MEMBER_MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update member fields: {', '.join(sorted(unknown))}")
        if "role" in changes:
            changes["role"] = Role.parse(changes["role"])
        if "status" in changes:
            changes["status"] = MemberStatus.parse(changes["status"])

        idx = self._member_index(member_id)
        if idx is None:
            return False
        updated = replace(self._members[idx], **changes)
        self._members = [*self._members[:idx], updated, *self._members[idx + 1 :]]
        self._notify("member.updated", member_id)
        return True

    def remove_team_member(self, member_id: str) -> bool:
        """Remove a member. Tasks assigned to them keep the (now dangling) assignee_id."""
        before = len(self._members)
        self._members = [m for m in self._members if m.id != member_id]
        if len(self._members) == before:
            return False
        logger.info("Team member removed id=%s", member_id)
        self._notify("member.removed", member_id)
        return True

    # ---- notifications ----

    def add_notification(
        self,
        *,
        type: NotificationType | str,
        title: str,
        message: str,
        task_id: str | None = None,
    ) -> Notification:
        note = Notification(
            id=self._new_id(),
            type=NotificationType(type),
            title=title,
            message=message,
            read=False,
            created_at=self._now_iso(),
            task_id=task_id,
        )
        self._notifications = [note, *self._notifications]
        self._notify("notification.added", note.id)
        return note

    def mark_notification_read(self, notification_id: str) -> bool:
        for i, n in enumerate(self._notifications):
            if n.id != notification_id:
                continue
            if not n.read:
                self._notifications = [
                    *self._notifications[:i],
                    replace(n, read=True),
                    *self._notifications[i + 1 :],
                ]
                self._notify("notification.read", notification_id)
            return True
        return False

    def mark_all_notifications_read(self) -> int:
        """Mark every notification read. Returns how many changed (0 on repeat calls)."""
        changed = sum(1 for n in self._notifications if not n.read)
        if not changed:
            return 0
        self._notifications = [n if n.read else replace(n, read=True) for n in self._notifications]
        self._notify("notification.read_all")
        return changed

    def delete_notification(self, notification_id: str) -> bool:
        before = len(self._notifications)
        self._notifications = [n for n in self._notifications if n.id != notification_id]
        if len(self._notifications) == before:
            return False
        self._notify("notification.deleted", notification_id)
        return True

    # ---- activity / meetings ----

    def add_activity(self, message: str) -> Activity:
        entry = Activity(
            id=self._new_id(),
            message=message,
            author=self._activity_author,
            timestamp=self._now_iso(),
        )
        self._activities = [entry, *self._activities]
        self._notify("activity.added", entry.id)
        return entry

    def add_meeting(
        self,
        *,
        title: str,
        date: str,
        time: str,
        description: str = "",
        link: str | None = None,
    ) -> Meeting:
        if not title or not title.strip():
            raise ValueError("title is required")
        meeting = Meeting(
            id=self._new_id(),
            title=title.strip(),
            date=date,
            time=time,
            description=description,
            link=link or None,
        )
        self._meetings = [*self._meetings, meeting]
        self._notify("meeting.added", meeting.id)
        return meeting

    # ---- derived ----

    def get_metrics(self) -> WorkspaceMetrics:
        ws_tasks = self.workspace_tasks()
        return WorkspaceMetrics(
            active_workspaces=sum(1 for w in self._workspaces if w.is_active),
            total_workspaces=len(self._workspaces),
            completed_tasks=sum(1 for t in ws_tasks if t.status == TaskStatus.DONE),
            in_progress_tasks=sum(1 for t in ws_tasks if t.status == TaskStatus.IN_PROGRESS),
            team_members=len(self._members),
        )

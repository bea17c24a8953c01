# src/sprintdesk/workspace/commitments.py

from __future__ import annotations

import logging
from datetime import date

from ..session.models import User
from .models import TaskStatus
from .store import WorkspaceStore

logger = logging.getLogger(__name__)


def can_manage_commitments(user: User | None) -> bool:
    return user is not None and user.is_manager


def toggle_commitment(store: WorkspaceStore, user: User | None, task_id: str) -> bool:
    """Flip a commitment between Done and In Progress. Managers only."""
    if not can_manage_commitments(user):
        raise PermissionError("Only Admins and Scrum Masters can modify commitments.")

    task = store.get_task(task_id)
    if task is None:
        return False

    new_status = TaskStatus.IN_PROGRESS if task.status == TaskStatus.DONE else TaskStatus.DONE
    logger.debug("Commitment %s -> %s", task_id, new_status.value)
    return store.update_task(task_id, status=new_status)


def days_remaining(due_date: str, today: date) -> int | None:
    """Whole days from `today` until `due_date` (negative when overdue)."""
    try:
        due = date.fromisoformat((due_date or "").strip())
    except ValueError:
        return None
    return (due - today).days

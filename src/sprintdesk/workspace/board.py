# src/sprintdesk/workspace/board.py

"""
Kanban board helpers.

The drag-and-drop library is outside this package; the board only consumes
its drag-end contract: (id of the dragged task, id of the column it was
dropped on). Column ids are the status display values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .models import Task, TaskStatus
from .store import WorkspaceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DragEndEvent:
    active_id: str
    over_id: str | None


def board_columns(tasks: Iterable[Task]) -> dict[TaskStatus, list[Task]]:
    columns: dict[TaskStatus, list[Task]] = {st: [] for st in TaskStatus}
    for t in tasks:
        columns[t.status].append(t)
    return columns


def handle_drag_end(store: WorkspaceStore, event: DragEndEvent, actor: str | None) -> bool:
    """
    Apply a drag-end event to the store. Returns True when a task moved.

    Dropped outside any column, onto a non-status target, or a task from
    another workspace: nothing happens.
    """
    if event.over_id is None:
        return False

    target = TaskStatus.try_parse(event.over_id)
    if target is None:
        logger.debug("Drag end on non-column target %r ignored", event.over_id)
        return False

    task = store.get_task(event.active_id)
    if task is None or task.workspace_id != store.current_workspace:
        return False

    return store.move_task(task.id, target, actor)


def subtask_progress(task: Task) -> tuple[int, int]:
    done = sum(1 for st in task.subtasks if st.completed)
    return done, len(task.subtasks)

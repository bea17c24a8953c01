# src/sprintdesk/assistant/service.py

"""
AI assistant orchestration.

The service is client-agnostic: it gathers workspace context from the store,
waits out the simulated processing delay and joins the client's streamed
chunks into one reply. Adding a suggested task goes through the store like
any other task creation.
"""

from __future__ import annotations

import asyncio
import logging
import re
from datetime import UTC, date, datetime, timedelta

from ..core.ports import AssistantClient, Clock, Delay
from ..workspace.models import Task, TaskStatus
from ..workspace.store import WorkspaceStore
from .client import friendly_assistant_error_message
from .models import AssistantContext, AssistantMode, AssistantReply, TaskDraft

logger = logging.getLogger(__name__)

_LEADING_VERB = re.compile(r"^(add|create|make)\s*", re.IGNORECASE)
_TRAILING_NOUN = re.compile(r"\s*(task|todo)$", re.IGNORECASE)

SUGGESTED_DUE_DAYS = 7


def suggested_title(prompt: str) -> str:
    """'Create login page task' -> 'login page'."""
    return _TRAILING_NOUN.sub("", _LEADING_VERB.sub("", prompt.strip()))


def draft_from_prompt(prompt: str, today: date, workspace_id: str) -> TaskDraft:
    return TaskDraft(
        title=suggested_title(prompt),
        description=f'Generated from AI prompt: "{prompt.strip()}"',
        due_date=(today + timedelta(days=SUGGESTED_DUE_DAYS)).isoformat(),
        workspace_id=workspace_id,
        status=TaskStatus.TODO.value,
    )


class AssistantService:
    def __init__(
        self,
        store: WorkspaceStore,
        client: AssistantClient,
        *,
        delay: Delay | None = None,
        delay_seconds: float = 2.0,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._delay: Delay = delay if delay is not None else asyncio.sleep
        self._delay_seconds = max(0.0, float(delay_seconds))
        self._clock: Clock = clock if clock is not None else (lambda: datetime.now(UTC))

    @property
    def client(self) -> AssistantClient:
        return self._client

    def _today(self) -> date:
        return self._clock().date()

    def build_context(self, mode: AssistantMode, prompt: str) -> AssistantContext:
        ws_id = self._store.current_workspace
        ws = self._store.current_workspace_record()
        tasks = self._store.workspace_tasks()
        draft = None
        if mode is AssistantMode.GENERATE:
            draft = draft_from_prompt(prompt, self._today(), ws_id)
        return AssistantContext(
            workspace_id=ws_id,
            workspace_name=ws.name if ws is not None else "",
            completed_titles=[t.title for t in tasks if t.status == TaskStatus.DONE],
            in_progress_titles=[t.title for t in tasks if t.status == TaskStatus.IN_PROGRESS],
            draft=draft,
        )

    async def respond(self, mode: AssistantMode | str, prompt: str) -> AssistantReply | None:
        """Produce the reply for `mode`. Returns None for a blank prompt."""
        m = AssistantMode(mode)
        if not (prompt or "").strip():
            return None

        await self._delay(self._delay_seconds)

        context = self.build_context(m, prompt)
        try:
            text = "".join(piece for piece in self._client.stream_reply(m.value, prompt, context) if piece)
        except RuntimeError as e:
            msg = friendly_assistant_error_message(e)
            logger.info("Assistant runtime error: %s", msg)
            return AssistantReply(mode=m, text=msg, draft=None)

        logger.debug("Assistant reply mode=%s chars=%d", m.value, len(text))
        return AssistantReply(mode=m, text=text, draft=context.draft)

    def add_suggested_task(self, prompt: str) -> Task | None:
        """Create the task a generate-mode prompt describes, in the current workspace."""
        if not (prompt or "").strip():
            return None
        draft = draft_from_prompt(prompt, self._today(), self._store.current_workspace)
        if not draft.title.strip():
            return None
        task = self._store.add_task(
            title=draft.title,
            description=draft.description,
            status=TaskStatus.TODO,
            assignee_id="",
            due_date=draft.due_date,
            workspace_id=draft.workspace_id,
            subtasks=[],
        )
        logger.info("Assistant added task id=%s title=%s", task.id, task.title)
        return task

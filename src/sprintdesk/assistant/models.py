# src/sprintdesk/assistant/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class AssistantMode(StrEnum):
    GENERATE = "generate"
    SUMMARIZE = "summarize"
    SUGGEST = "suggest"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    AssistantMode.GENERATE: "Generate Task",
    AssistantMode.SUMMARIZE: "Stand-up Summary",
    AssistantMode.SUGGEST: "Suggest Next Steps",
}


@dataclass(frozen=True, slots=True)
class TaskDraft:
    title: str
    description: str
    due_date: str
    workspace_id: str
    status: str = "To Do"


@dataclass(frozen=True, slots=True)
class AssistantContext:
    workspace_id: str
    workspace_name: str
    completed_titles: list[str] = field(default_factory=list)
    in_progress_titles: list[str] = field(default_factory=list)
    draft: TaskDraft | None = None


@dataclass(frozen=True, slots=True)
class AssistantReply:
    mode: AssistantMode
    text: str
    draft: TaskDraft | None = None

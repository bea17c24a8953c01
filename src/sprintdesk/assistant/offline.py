# src/sprintdesk/assistant/offline.py

from __future__ import annotations

from collections.abc import Iterable

from .models import AssistantContext, AssistantMode


class OfflineAssistantClient:
    """
    Deterministic assistant used when no external API is configured.

    Behavior:
    - generate  -> shows the suggested task draft
    - summarize -> stand-up summary from the workspace's completed / in-progress tasks
    - suggest   -> fixed list of next steps
    """

    def stream_reply(self, mode: str, prompt: str, context: AssistantContext) -> Iterable[str]:
        m = AssistantMode(mode)

        if m is AssistantMode.GENERATE:
            draft = context.draft
            if draft is None:
                yield "I could not build a task from that prompt."
                return
            yield (
                "I've generated a task suggestion based on your prompt. "
                "Would you like me to add this task to your workspace?\n\n"
                "**Suggested Task:**\n"
                f"- Title: {draft.title}\n"
                f"- Description: {draft.description}\n"
                f"- Due Date: {draft.due_date}\n"
                f"- Status: {draft.status}\n\n"
                "Confirm to add it to your Kanban board."
            )
            return

        if m is AssistantMode.SUMMARIZE:
            done = context.completed_titles
            active = context.in_progress_titles
            yield (
                "**Stand-up Summary**\n\n"
                "**Yesterday:**\n"
                f"- Completed {len(done)} tasks\n"
                f"- Key accomplishments: {', '.join(done[:2])}\n\n"
                "**Today:**\n"
                f"- {len(active)} tasks in progress\n"
                f"- Focus areas: {', '.join(active[:2])}\n\n"
                "**Blockers:**\n"
                "- No significant blockers identified\n"
                "- Team collaboration proceeding smoothly"
            )
            return

        yield (
            "**Suggested Next Steps:**\n\n"
            "Based on your current workspace activity, here are my recommendations:\n\n"
            "1. **Priority Tasks:** Review overdue items and update their status\n"
            "2. **Team Coordination:** Schedule a sync meeting for in-progress tasks\n"
            "3. **Quality Check:** Move completed tasks through QA process\n"
            "4. **Planning:** Plan next sprint with stakeholder input\n\n"
            "Focus on completing current in-progress tasks before taking on new work."
        )

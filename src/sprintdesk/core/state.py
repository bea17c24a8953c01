# src/sprintdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..assistant.service import AssistantService
    from ..session.store import SessionStore
    from ..workspace.store import WorkspaceStore


@dataclass
class AppState:
    """
    Wired services handed to front ends.

    Front ends read from the stores and call their operations; they keep only
    transient view state of their own.
    """

    # Settings are kept on the state so front ends can show them (/status).
    settings: Any

    session: SessionStore
    workspace: WorkspaceStore
    assistant: AssistantService

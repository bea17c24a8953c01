# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from sprintdesk.assistant.models import AssistantContext
from sprintdesk.core.observable import StoreEvent


async def no_delay(_seconds: float) -> None:
    """Zero-delay replacement for asyncio.sleep."""
    return None


class RecordingDelay:
    """Delay that records requested durations without sleeping."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class SequentialIds:
    """Deterministic id factory: n1, n2, ..."""

    def __init__(self, prefix: str = "n") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}{self.n}"


class FakeAssistantClient:
    """
    Deterministic assistant client for unit tests.

    - Captures calls for assertions
    - Yields a predefined text as a single chunk (or raises `error`)
    """

    def __init__(self, next_text: str = "ok", error: Exception | None = None) -> None:
        self.next_text = next_text
        self.error = error
        self.calls: list[tuple[str, str, AssistantContext]] = []

    def stream_reply(self, mode: str, prompt: str, context: AssistantContext) -> Iterable[str]:
        self.calls.append((mode, prompt, context))
        if self.error is not None:
            raise self.error
        yield self.next_text


class EventRecorder:
    """Subscriber that keeps every StoreEvent it receives."""

    def __init__(self) -> None:
        self.events: list[StoreEvent] = []

    def __call__(self, event: StoreEvent) -> None:
        self.events.append(event)

    @property
    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]

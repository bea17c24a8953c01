# src/sprintdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Stores and services depend on Protocols instead of concrete implementations.
This keeps persistence, timing and assistant providers swappable and makes
testing easier (zero-delay fakes, in-memory storage).
"""

from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime
from typing import Any, Protocol

Delay = Callable[[float], Awaitable[None]]
# Suspends the caller for N seconds (asyncio.sleep in production).

Clock = Callable[[], datetime]
# Returns the current aware datetime.

IdFactory = Callable[[], str]


class SessionStorage(Protocol):
    """Persisted key-value slot holding the signed-in identity between runs."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class AssistantClient(Protocol):
    """
    Produces the assistant reply for one mode as streamed text chunks.

    `context` is an AssistantContext (kept as Any to avoid import coupling).
    """

    def stream_reply(self, mode: str, prompt: str, context: Any) -> Iterable[str]: ...

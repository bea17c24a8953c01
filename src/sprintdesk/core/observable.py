# src/sprintdesk/core/observable.py

"""
Subscribe/notify contract shared by the state containers.

Subscribers are called synchronously, in subscription order, after the
mutation has been applied. A failing subscriber is logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoreEvent:
    kind: str
    entity_id: str | None = None


Subscriber = Callable[[StoreEvent], None]


class Observable:
    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self, kind: str, entity_id: str | None = None) -> None:
        event = StoreEvent(kind=kind, entity_id=entity_id)
        logger.debug("%s: notify %s id=%s", type(self).__name__, kind, entity_id)
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logger.exception("Subscriber failed on %s (id=%s)", kind, entity_id)

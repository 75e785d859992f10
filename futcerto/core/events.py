"""In-process event bus used for explicit invalidation signals.

Readers that cache reservation data subscribe to ``RESERVATIONS_CHANGED``
instead of refetching on every render. One bus lives on the application
state and is handed to whoever needs it.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

logger = logging.getLogger(__name__)

RESERVATIONS_CHANGED = "reservations.changed"
SESSION_CHANGED = "session.changed"

Listener = Callable[[Any], None]


class EventBus:
    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, name: str, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for ``name`` and return a function that removes it."""

        self._listeners[name].append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners[name].remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def emit(self, name: str, payload: Any = None) -> None:
        for listener in list(self._listeners.get(name, ())):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener for %s failed", name)

    def listener_count(self, name: str) -> int:
        return len(self._listeners.get(name, ()))


__all__ = ["EventBus", "RESERVATIONS_CHANGED", "SESSION_CHANGED"]

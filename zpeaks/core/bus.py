from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable

from .event import Event

logger = logging.getLogger("zpeaks.core.bus")

WILDCARD = "*"


class EventBus:
    """Synchronous publish/subscribe hub. Handlers registered under ``"*"`` see every event."""

    def __init__(self) -> None:
        self.subscribers: dict[str, list[Callable[[Event], None]]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: Callable[[Event], None]) -> None:
        self.subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: str, handler: Callable[[Event], None]) -> None:
        handlers = self.subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Event) -> None:
        handlers = list(self.subscribers.get(event.type, [])) + list(self.subscribers.get(WILDCARD, []))
        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                logger.debug("Event handler error (%s): %s", event.type, exc)

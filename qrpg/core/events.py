"""Queued game events delivered once per frame."""

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List

logger = logging.getLogger(__name__)

Handler = Callable[["GameEvent"], None]


@dataclass
class GameEvent:
    """Something that happened during a turn."""

    event_type: str
    data: Dict[str, Any] | None = None


class EventBus:
    """Collects events during a turn and hands them to subscribers later."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)
        self._pending: Deque[GameEvent] = deque()

    def subscribe(self, event_type: str, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: str, handler: Handler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Queue an event until the next ``process`` call."""
        self._pending.append(event)

    def process(self) -> None:
        """Deliver pending events in emission order.

        A failing handler is logged and the remaining handlers still run.
        """
        while self._pending:
            event = self._pending.popleft()
            for handler in list(self._handlers.get(event.event_type, ())):
                try:
                    handler(event)
                except Exception:
                    logger.exception("Handler for %s failed", event.event_type)

    def clear(self) -> None:
        """Drop pending events without delivering them."""
        self._pending.clear()


event_bus = EventBus()

EVENT_ATTACK_PLACEHOLDER = "attack_placeholder"

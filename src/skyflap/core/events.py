"""
Event bus for SKYFLAP.

Carries core-to-presentation signals. Handlers run synchronously inside
the tick that emitted the event, so a presentation always sees them in
the order the game produced them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Game signals."""
    READY_ENTERED = auto()
    PLAYING_ENTERED = auto()
    GAME_OVER = auto()
    SCORE_CHANGED = auto()
    TICK = auto()  # One simulated frame


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload, e.g. ``{"score": 3}`` or ``{"frame": 120}``
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)


Handler = Callable[[Event], None]


class EventBus:
    """Routes each emitted event to the handlers subscribed to its type."""

    def __init__(self) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type.name}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type.name}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Call every handler for ``event.type``; a failing handler is logged."""
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.name}: {e}")


def score_event(event_type: EventType, score: int) -> Event:
    """Create a GAME_OVER or SCORE_CHANGED event."""
    return Event(event_type, data={"score": score})


def tick_event(frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"frame": frame})

"""
Presentation interface.

The rendering/UI layer receives game signals through these hooks. The
core never calls them directly; it emits events on the EventBus and
``connect`` routes them here.
"""

from typing import Callable
import logging

from skyflap.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)


class Presentation:
    """Base class for anything that shows the game to a player.

    Every hook is a no-op by default; override the ones you need.
    """

    def on_ready_entered(self) -> None:
        """Show the "get ready" screen and hide the score."""

    def on_playing_entered(self) -> None:
        """Hide the "get ready" screen and show the score."""

    def on_game_over(self, final_score: int) -> None:
        """Show the game over panel with the final score."""

    def on_score_changed(self, new_score: int) -> None:
        """Update the visible score."""


def connect(bus: EventBus, presentation: Presentation) -> Callable[[], None]:
    """Subscribe a presentation to the game signals on ``bus``.

    Returns:
        Function that disconnects the presentation again
    """
    unsubscribers = [
        bus.subscribe(
            EventType.READY_ENTERED,
            lambda event: presentation.on_ready_entered(),
        ),
        bus.subscribe(
            EventType.PLAYING_ENTERED,
            lambda event: presentation.on_playing_entered(),
        ),
        bus.subscribe(
            EventType.GAME_OVER,
            lambda event: presentation.on_game_over(_score(event)),
        ),
        bus.subscribe(
            EventType.SCORE_CHANGED,
            lambda event: presentation.on_score_changed(_score(event)),
        ),
    ]
    logger.debug(f"Presentation connected: {type(presentation).__name__}")

    def disconnect() -> None:
        for unsubscribe in unsubscribers:
            unsubscribe()

    return disconnect


def _score(event: Event) -> int:
    return int(event.data.get("score", 0))

"""
State machine for SKYFLAP game flow.

States:
    READY: Bird hovers, waiting for the first activation
    PLAYING: Physics and pipes are running
    OVER: Bird has crashed; waits for an explicit restart
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states."""
    READY = auto()
    PLAYING = auto()
    OVER = auto()


StateListener = Callable[[GameState, GameState], None]


class StateMachine:
    """
    Tracks the current game state and gates transitions.

    Only transitions in ``VALID_TRANSITIONS`` are accepted. A restart is
    not a transition: ``reset()`` returns to READY from any state.
    Listeners are called with ``(old_state, new_state)``.
    """

    VALID_TRANSITIONS: list[tuple[GameState, GameState]] = [
        (GameState.READY, GameState.PLAYING),   # First activation
        (GameState.PLAYING, GameState.OVER),    # Collision
        (GameState.OVER, GameState.READY),      # Restart
    ]

    def __init__(self, initial_state: GameState = GameState.READY) -> None:
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameState:
        """Get current state."""
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == GameState.READY

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_over(self) -> bool:
        return self._state == GameState.OVER

    def can_transition(self, to_state: GameState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameState) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.info(f"State transition: {old_state.name} -> {to_state.name}")
        self._notify(old_state, to_state)
        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self) -> None:
        """Reset state machine to READY, whatever the current state."""
        old_state = self._state
        self._state = GameState.READY
        self._notify(old_state, GameState.READY)
        logger.info(f"StateMachine reset to READY (was {old_state.name})")

    def _notify(self, old_state: GameState, new_state: GameState) -> None:
        for listener in self._listeners:
            try:
                listener(old_state, new_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

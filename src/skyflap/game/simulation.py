"""
Top-level game context.

Owns every game component and runs one frame per ``tick()``. Player
input arrives through ``activate()`` and ``restart()``; both are queued
and applied at the start of the next tick, so a tick always sees a
consistent world.
"""

from collections import deque
from enum import Enum, auto
from typing import Deque, Optional
import logging
import random

from skyflap.config.settings import Settings, get_settings
from skyflap.core.clock import FrameCounter
from skyflap.core.events import Event, EventBus, EventType, score_event, tick_event
from skyflap.core.state import GameState, StateMachine
from skyflap.game.bird import Bird
from skyflap.game.obstacles import ObstacleField
from skyflap.game.score import ScoreTracker

logger = logging.getLogger(__name__)


class InputAction(Enum):
    """Player inputs understood by the simulation."""
    ACTIVATE = auto()  # Start or flap
    RESTART = auto()


class GameSimulation:
    """A complete game: state, clock, score, bird and pipes.

    Signals for the presentation layer are emitted on ``event_bus``;
    connect a presentation to the bus before constructing the
    simulation to receive the initial READY_ENTERED.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.event_bus = event_bus or EventBus()

        self.state_machine = StateMachine()
        self.clock = FrameCounter()
        self.score = ScoreTracker(on_change=self._on_score_changed)
        self.bird = Bird(self.settings.bird, self.settings.playfield)
        self.obstacles = ObstacleField(
            self.settings.obstacles,
            rng=rng or random.Random(self.settings.seed),
        )

        self._inputs: Deque[InputAction] = deque()
        self.state_machine.add_listener(self._on_state_changed)

        self._emit(Event(EventType.READY_ENTERED))
        logger.info(
            f"Game created: field {self.settings.playfield.width}x"
            f"{self.settings.playfield.height}, seed={self.settings.seed}"
        )

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def frame(self) -> int:
        """Number of frames simulated since the last reset."""
        return self.clock.value

    @property
    def pending_inputs(self) -> int:
        return len(self._inputs)

    # Inputs
    def activate(self) -> None:
        """Queue a start-or-flap action for the next tick."""
        self._inputs.append(InputAction.ACTIVATE)

    def restart(self) -> None:
        """Queue a full reset to READY for the next tick."""
        self._inputs.append(InputAction.RESTART)

    # Frame loop
    def tick(self) -> int:
        """Simulate one frame.

        Returns:
            Index of the frame that was simulated
        """
        while self._inputs:
            self._apply(self._inputs.popleft())

        frame = self.clock.advance()
        state = self.state

        hit_pipe = self.obstacles.update(
            state, frame, self.settings.playfield.width, self.bird, self.score
        )
        hit_ground = self.bird.update(state, frame)

        if state == GameState.PLAYING and (hit_pipe or hit_ground):
            logger.info(
                f"Crashed into {'a pipe' if hit_pipe else 'the ground'} "
                f"at frame {frame} with score {self.score.value}"
            )
            self.state_machine.transition(GameState.OVER)

        assert self.score.value >= 0
        self.event_bus.emit(tick_event(frame))
        return frame

    def run(self, frames: int) -> GameState:
        """Simulate ``frames`` ticks and return the resulting state."""
        for _ in range(frames):
            self.tick()
        return self.state

    # Internals
    def _apply(self, action: InputAction) -> None:
        if action == InputAction.RESTART:
            self._reset_world()
            return

        if self.state == GameState.READY:
            self.state_machine.transition(GameState.PLAYING)
            self.bird.flap()
        elif self.state == GameState.PLAYING:
            self.bird.flap()
        else:
            logger.debug("Activation ignored while game is over")

    def _reset_world(self) -> None:
        self.score.reset()
        self._emit(score_event(EventType.SCORE_CHANGED, 0))
        self.clock.reset()
        self.bird.reset()
        self.obstacles.reset()
        self.state_machine.reset()

    def _on_state_changed(self, old_state: GameState, new_state: GameState) -> None:
        if new_state == GameState.READY:
            self._emit(Event(EventType.READY_ENTERED))
        elif new_state == GameState.PLAYING:
            self._emit(Event(EventType.PLAYING_ENTERED))
        elif new_state == GameState.OVER:
            self._emit(score_event(EventType.GAME_OVER, self.score.value))

    def _on_score_changed(self, score: int) -> None:
        self._emit(score_event(EventType.SCORE_CHANGED, score))

    def _emit(self, event: Event) -> None:
        self.event_bus.emit(event)

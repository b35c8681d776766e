"""The bird: vertical physics, tilt and floor/ceiling contact."""

from typing import Optional, Tuple
import logging
import math

from skyflap.config.settings import BirdSettings, FieldSettings
from skyflap.core.state import GameState

logger = logging.getLogger(__name__)

# Wing positions cycled by the animation: up, mid, down, mid
WING_CYCLE = (0, 1, 2, 1)


class Bird:
    """Player-controlled bird.

    The bird never moves horizontally; the world scrolls past it.
    Positions are the centre of the collision circle, y grows downward.
    """

    def __init__(
        self,
        settings: Optional[BirdSettings] = None,
        playfield: Optional[FieldSettings] = None,
    ) -> None:
        self.settings = settings or BirdSettings()
        self.playfield = playfield or FieldSettings()

        self.x = self.settings.x
        self.radius = self.settings.radius
        self.y = self.settings.baseline_y
        self.velocity = 0.0
        self.rotation = 0.0
        self.wing_frame = 0

        self._rise_tilt = math.radians(self.settings.rise_tilt_deg)
        self._dive_tilt = math.radians(self.settings.dive_tilt_deg)
        self._tilt_step = math.radians(self.settings.tilt_step_deg)

    @property
    def ground_y(self) -> float:
        return self.playfield.ground_y

    @property
    def wing(self) -> int:
        """Current wing position from the animation cycle."""
        return WING_CYCLE[self.wing_frame]

    def bounds(self) -> Tuple[float, float, float, float]:
        """Square hit box around the collision circle: (left, top, right, bottom)."""
        r = self.radius
        return (self.x - r, self.y - r, self.x + r, self.y + r)

    def flap(self) -> None:
        """Set the velocity to the upward jump impulse (not additive)."""
        self.velocity = -self.settings.jump

    def update(self, state: GameState, frame: int) -> bool:
        """Advance the bird by one frame.

        Args:
            state: Current game state
            frame: Index of the frame being simulated

        Returns:
            True if the bird hit the ground this frame
        """
        self._animate(state, frame)

        if state == GameState.READY:
            self.y = self.settings.baseline_y + (
                math.cos(frame / self.settings.bob_period) * self.settings.bob_amplitude
            )
            self.rotation = 0.0
            return False

        if state != GameState.PLAYING:
            return False

        # Semi-implicit Euler: velocity first, then position
        self.velocity += self.settings.gravity
        self.y += self.velocity
        self._tilt()

        if self.y - self.radius <= 0:
            self.y = self.radius
            self.velocity = 0.0

        if self.y + self.radius >= self.ground_y:
            self.y = self.ground_y - self.radius
            logger.debug(f"Bird hit the ground at frame {frame}")
            return True

        return False

    def reset(self) -> None:
        self.y = self.settings.baseline_y
        self.velocity = 0.0
        self.rotation = 0.0
        self.wing_frame = 0

    def _tilt(self) -> None:
        if self.velocity < 0:
            self.rotation = self._rise_tilt
        else:
            self.rotation = min(self.rotation + self._tilt_step, self._dive_tilt)

    def _animate(self, state: GameState, frame: int) -> None:
        if state == GameState.READY:
            period = self.settings.ready_wing_period
        else:
            period = self.settings.play_wing_period
        if frame % period == 0:
            self.wing_frame = (self.wing_frame + 1) % len(WING_CYCLE)

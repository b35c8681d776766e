"""Draws the playfield of a running game into a frame buffer."""

from typing import Optional, Tuple
import math

import numpy as np
from numpy.typing import NDArray

from skyflap.config.settings import FieldSettings
from skyflap.game.bird import Bird
from skyflap.game.obstacles import ObstacleField
from skyflap.game.simulation import GameSimulation
from skyflap.graphics.primitives import (
    Color, new_buffer, fill, draw_rect, draw_circle, draw_ellipse,
    draw_polygon, draw_hline,
)

SKY = (112, 197, 206)
CLOUD = (255, 255, 255)
PIPE = (46, 204, 113)
PIPE_EDGE = (39, 174, 96)
GROUND = (222, 216, 149)
GRASS = (115, 191, 46)
GROUND_LINE = (85, 85, 85)
BIRD_BODY = (241, 196, 15)
BIRD_WING = (243, 156, 18)
BEAK = (230, 126, 34)
EYE = (255, 255, 255)
INK = (0, 0, 0)

# (cx, cy, r) puffs making up two static clouds
CLOUDS = (
    (100, 300, 30), (140, 300, 40), (180, 300, 30),
    (200, 100, 20), (230, 100, 30), (260, 100, 20),
)

CAP_HEIGHT = 20
CAP_OVERHANG = 2
GRASS_HEIGHT = 12


class SceneRenderer:
    """Renders sky, clouds, pipes, ground and bird.

    The same buffer is reused every frame; callers that keep a frame
    around must copy it.
    """

    def __init__(self, playfield: Optional[FieldSettings] = None) -> None:
        self.playfield = playfield or FieldSettings()
        self.buffer: NDArray[np.uint8] = new_buffer(
            self.playfield.width, self.playfield.height
        )

    def render(self, game: GameSimulation) -> NDArray[np.uint8]:
        """Draw the current state of ``game`` and return the buffer."""
        self.draw_background()
        self.draw_pipes(game.obstacles)
        self.draw_ground()
        self.draw_bird(game.bird)
        return self.buffer

    def draw_background(self) -> None:
        fill(self.buffer, SKY)
        for cx, cy, r in CLOUDS:
            draw_circle(self.buffer, cx, cy, r, CLOUD)

    def draw_pipes(self, field: ObstacleField) -> None:
        width = field.settings.width
        pillar = field.settings.pillar_height
        for obstacle in field:
            top_y = obstacle.y
            bottom_y = field.gap_bottom(obstacle)

            self._pipe_segment(obstacle.x, top_y, width, pillar)
            self._pipe_segment(
                obstacle.x - CAP_OVERHANG, top_y + pillar - CAP_HEIGHT,
                width + 2 * CAP_OVERHANG, CAP_HEIGHT,
            )
            self._pipe_segment(obstacle.x, bottom_y, width, pillar)
            self._pipe_segment(
                obstacle.x - CAP_OVERHANG, bottom_y,
                width + 2 * CAP_OVERHANG, CAP_HEIGHT,
            )

    def draw_ground(self) -> None:
        ground_y = self.playfield.ground_y
        draw_rect(self.buffer, 0, ground_y, self.playfield.width,
                  self.playfield.ground_height, GROUND)
        draw_rect(self.buffer, 0, ground_y, self.playfield.width, GRASS_HEIGHT, GRASS)
        draw_hline(self.buffer, ground_y, GROUND_LINE)

    def draw_bird(self, bird: Bird) -> None:
        r = bird.radius
        angle = bird.rotation

        def at(ox: float, oy: float) -> Tuple[float, float]:
            return _rotate(bird.x, bird.y, ox, oy, angle)

        draw_circle(self.buffer, bird.x, bird.y, r, BIRD_BODY, outline=INK, thickness=2)

        ex, ey = at(6, -6)
        draw_circle(self.buffer, ex, ey, 5, EYE, outline=INK)
        px, py = at(8, -6)
        draw_circle(self.buffer, px, py, 2, INK)

        draw_polygon(self.buffer, [at(8, 2), at(16, 6), at(8, 10)], BEAK)

        # Wing sits higher or lower depending on the animation frame
        wx, wy = at(-4, 4 + (bird.wing - 1) * 2)
        draw_ellipse(self.buffer, wx, wy, 8, 5, BIRD_WING,
                     angle=angle, outline=INK)

    def _pipe_segment(self, x: float, y: float, w: float, h: float) -> None:
        draw_rect(self.buffer, x, y, w, h, PIPE)
        draw_rect(self.buffer, x, y, w, h, PIPE_EDGE, filled=False, thickness=2)


def _rotate(cx: float, cy: float, ox: float, oy: float, angle: float) -> Tuple[float, float]:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return (cx + ox * cos_a - oy * sin_a, cy + ox * sin_a + oy * cos_a)


def color_at(buffer: NDArray[np.uint8], x: float, y: float) -> Color:
    """Read back the pixel under a playfield coordinate."""
    px, py = int(x), int(y)
    r, g, b = buffer[py, px]
    return (int(r), int(g), int(b))

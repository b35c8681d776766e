"""Pipe pairs: spawning, scrolling, pruning and hit-testing."""

from dataclasses import dataclass
from typing import Iterator, List, Optional
import logging
import random

from skyflap.config.settings import ObstacleSettings
from skyflap.core.state import GameState
from skyflap.game.bird import Bird
from skyflap.game.score import ScoreTracker

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """One pipe pair.

    ``y`` is the top of the upper pillar. The gap spans
    ``[y + pillar_height, y + pillar_height + gap]``.
    """

    x: float
    y: float


class ObstacleField:
    """Ordered pipe pairs, leftmost first.

    All pipes spawn at the same x and scroll at the same speed, so
    insertion order is also left-to-right order and the oldest pipe is
    always the first to leave the screen.
    """

    def __init__(
        self,
        settings: Optional[ObstacleSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or ObstacleSettings()
        self.rng = rng or random.Random()
        self._obstacles: List[Obstacle] = []

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    @property
    def obstacles(self) -> List[Obstacle]:
        """Snapshot of the current pipes, leftmost first."""
        return list(self._obstacles)

    # Geometry helpers
    def gap_top(self, obstacle: Obstacle) -> float:
        """Lower edge of the top pillar."""
        return obstacle.y + self.settings.pillar_height

    def gap_bottom(self, obstacle: Obstacle) -> float:
        """Upper edge of the bottom pillar."""
        return obstacle.y + self.settings.pillar_height + self.settings.gap

    def right_edge(self, obstacle: Obstacle) -> float:
        return obstacle.x + self.settings.width

    def spawn(self, field_width: float) -> Obstacle:
        """Append a new pipe at the right edge of the field."""
        offset = self.settings.base_offset
        obstacle = Obstacle(x=float(field_width), y=offset * (self.rng.random() + 1))
        self._obstacles.append(obstacle)
        logger.debug(f"Spawned pipe at x={obstacle.x:.0f}, y={obstacle.y:.1f}")
        return obstacle

    def update(
        self,
        state: GameState,
        frame: int,
        field_width: float,
        bird: Bird,
        score: ScoreTracker,
    ) -> bool:
        """Spawn, scroll, prune and hit-test for one frame.

        Does nothing unless the game is PLAYING. Every pipe whose right
        edge has reached x=0 is removed and scores one point.

        Returns:
            True if the bird overlaps any pipe
        """
        if state != GameState.PLAYING:
            return False

        if frame % self.settings.spawn_interval == 0:
            self.spawn(field_width)

        for obstacle in self._obstacles:
            obstacle.x -= self.settings.speed

        passed = self._prune()
        if passed:
            score.increment(passed)

        self._check_order()
        return any(self.collides(obstacle, bird) for obstacle in self._obstacles)

    def collides(self, obstacle: Obstacle, bird: Bird) -> bool:
        """Hit-test the bird's square hit box against one pipe pair."""
        left, top, right, bottom = bird.bounds()
        if not (right > obstacle.x and left < self.right_edge(obstacle)):
            return False
        return top < self.gap_top(obstacle) or bottom > self.gap_bottom(obstacle)

    def reset(self) -> None:
        self._obstacles.clear()

    def _prune(self) -> int:
        passed = 0
        while self._obstacles and self.right_edge(self._obstacles[0]) <= 0:
            self._obstacles.pop(0)
            passed += 1
        if passed:
            logger.debug(f"Pruned {passed} pipe(s), {len(self._obstacles)} remaining")
        return passed

    def _check_order(self) -> None:
        xs = [obstacle.x for obstacle in self._obstacles]
        assert xs == sorted(xs), "obstacles out of order"

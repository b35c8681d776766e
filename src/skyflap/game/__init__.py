"""Game components for SKYFLAP."""

from skyflap.game.bird import Bird
from skyflap.game.obstacles import Obstacle, ObstacleField
from skyflap.game.score import ScoreTracker
from skyflap.game.simulation import GameSimulation, InputAction

__all__ = [
    "Bird",
    "Obstacle",
    "ObstacleField",
    "ScoreTracker",
    "GameSimulation",
    "InputAction",
]

"""Shared fixtures."""

import random

import pytest

from skyflap.config.settings import Settings
from skyflap.core.events import EventBus
from skyflap.core.presentation import Presentation, connect
from skyflap.game.bird import Bird
from skyflap.game.obstacles import ObstacleField
from skyflap.game.score import ScoreTracker
from skyflap.game.simulation import GameSimulation


class RecordingPresentation(Presentation):
    """Remembers every signal it receives, in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def on_ready_entered(self) -> None:
        self.calls.append(("ready",))

    def on_playing_entered(self) -> None:
        self.calls.append(("playing",))

    def on_game_over(self, final_score: int) -> None:
        self.calls.append(("over", final_score))

    def on_score_changed(self, new_score: int) -> None:
        self.calls.append(("score", new_score))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


class FixedRandom(random.Random):
    """Random source whose uniform draw is always ``value``."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def bird(settings: Settings) -> Bird:
    return Bird(settings.bird, settings.playfield)


@pytest.fixture
def score() -> ScoreTracker:
    return ScoreTracker()


@pytest.fixture
def field(settings: Settings) -> ObstacleField:
    return ObstacleField(settings.obstacles, rng=random.Random(1234))


@pytest.fixture
def presentation() -> RecordingPresentation:
    return RecordingPresentation()


@pytest.fixture
def bus(presentation: RecordingPresentation) -> EventBus:
    bus = EventBus()
    connect(bus, presentation)
    return bus


@pytest.fixture
def make_game(settings: Settings, bus: EventBus):
    """Build a game on the recording bus with a chosen random source."""
    def factory(rng: random.Random | None = None) -> GameSimulation:
        return GameSimulation(settings, bus, rng=rng or random.Random(1234))
    return factory


@pytest.fixture
def game(make_game) -> GameSimulation:
    return make_game()


@pytest.fixture
def fixed_random():
    """Factory for a random source with a constant uniform draw."""
    return FixedRandom

import pytest

from skyflap.core.clock import FrameCounter
from skyflap.game.score import ScoreTracker


def test_frame_counter_returns_index_of_current_frame():
    clock = FrameCounter()
    assert clock.value == 0
    assert clock.advance() == 0
    assert clock.advance() == 1
    assert clock.value == 2


def test_frame_counter_rejects_negative_count():
    clock = FrameCounter()
    clock._frames = -1
    with pytest.raises(AssertionError):
        clock.advance()


def test_frame_counter_reset():
    clock = FrameCounter()
    for _ in range(50):
        clock.advance()
    clock.reset()
    assert clock.value == 0
    assert clock.advance() == 0


def test_score_starts_at_zero():
    assert ScoreTracker().value == 0


def test_score_reports_every_point():
    seen = []
    score = ScoreTracker(on_change=seen.append)
    score.increment()
    score.increment(2)
    assert score.value == 3
    assert int(score) == 3
    assert seen == [1, 2, 3]


def test_score_cannot_decrease():
    score = ScoreTracker()
    score.increment()
    with pytest.raises(AssertionError):
        score.increment(-1)
    assert score.value == 1


def test_score_reset():
    score = ScoreTracker()
    score.increment(5)
    score.reset()
    assert score.value == 0

"""Score for the current run."""

from typing import Callable, Optional


class ScoreTracker:
    """Counts pipes passed. Only ever goes up during a run."""

    def __init__(self, on_change: Optional[Callable[[int], None]] = None) -> None:
        self._value = 0
        self._on_change = on_change

    @property
    def value(self) -> int:
        return self._value

    def increment(self, amount: int = 1) -> None:
        """Add ``amount`` points, reporting each new value in turn."""
        assert amount >= 0, "score cannot decrease"
        for _ in range(amount):
            self._value += 1
            if self._on_change:
                self._on_change(self._value)

    def reset(self) -> None:
        self._value = 0

    def __int__(self) -> int:
        return self._value

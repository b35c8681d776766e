"""Frame counter driving all periodic game behavior."""


class FrameCounter:
    """Monotonic count of simulated frames since the last reset."""

    def __init__(self) -> None:
        self._frames = 0

    @property
    def value(self) -> int:
        """Number of frames simulated since reset."""
        return self._frames

    def advance(self) -> int:
        """Start a new frame.

        Returns:
            Index of the frame being simulated (0 for the first frame
            after a reset).
        """
        assert self._frames >= 0, "frame counter went negative"
        frame = self._frames
        self._frames += 1
        return frame

    def reset(self) -> None:
        self._frames = 0

    def __repr__(self) -> str:
        return f"FrameCounter({self._frames})"

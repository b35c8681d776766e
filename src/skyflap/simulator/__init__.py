"""Desktop pygame host for SKYFLAP."""

from skyflap.simulator.window import SimulatorWindow, WindowConfig

__all__ = ["SimulatorWindow", "WindowConfig"]

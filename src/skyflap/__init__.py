"""SKYFLAP - flap between the pipes."""

__version__ = "0.1.0"

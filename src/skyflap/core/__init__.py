"""Core framework components for SKYFLAP."""

from .state import GameState, StateMachine
from .events import EventBus, Event, EventType
from .clock import FrameCounter
from .presentation import Presentation, connect

__all__ = [
    "GameState",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "FrameCounter",
    "Presentation",
    "connect",
]

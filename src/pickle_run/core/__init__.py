"""Core framework components for Pickle Run."""

from .state import GameState, StateMachine
from .events import EventBus, Event, EventType
from .viewport import Viewport

__all__ = ["GameState", "StateMachine", "EventBus", "Event", "EventType", "Viewport"]

"""
Event bus for Pickle Run.

The window publishes jumps, resizes and frame ticks; the game session
subscribes to them and publishes what happened in the game.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
from collections import defaultdict
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    # Input
    JUMP = auto()
    RESIZE = auto()

    # Game
    STATE_CHANGED = auto()
    RUN_STARTED = auto()
    RUN_FAILED = auto()
    COLLECTED = auto()
    WIN = auto()

    # Window
    TICK = auto()
    SHUTDOWN = auto()


@dataclass
class Event:
    """A published event. `source` names the publisher (mouse, touch, session...)."""
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """Synchronous publish/subscribe between the window and the session.

    Handlers run in subscription order inside emit(). A failing handler
    is logged and does not stop the others.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """Subscribe to one event type. Returns an unsubscribe function."""
        handlers = self._handlers[event_type]
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        for handler in list(self._handlers.get(event.type, ())):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in {event.type.name} handler: {e}")


def jump_event(source: str = "pointer") -> Event:
    return Event(EventType.JUMP, source=source)


def resize_event(width: int, height: int, source: str = "window") -> Event:
    return Event(EventType.RESIZE, data={"width": width, "height": height}, source=source)


def tick_event(delta: float, frame: int) -> Event:
    """Create a frame tick event. `delta` is the previous frame's duration in seconds."""
    return Event(EventType.TICK, data={"delta": delta, "frame": frame})

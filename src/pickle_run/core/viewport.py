"""Drawable surface dimensions."""

import logging

logger = logging.getLogger(__name__)


class Viewport:
    """
    Current size of the drawable surface.

    Entities are laid out from these dimensions when they are created;
    a later resize does not move them.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def resize(self, width: int, height: int) -> bool:
        """Set new dimensions. Non-positive sizes (minimized window) are ignored."""
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring resize to {width}x{height}")
            return False

        self.width = width
        self.height = height
        logger.debug(f"Viewport resized to {width}x{height}")
        return True

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def __repr__(self) -> str:
        return f"Viewport({self.width}x{self.height})"

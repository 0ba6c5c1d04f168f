"""Desktop window hosting the game loop."""

from .window import GameWindow, WindowConfig

__all__ = ["GameWindow", "WindowConfig"]

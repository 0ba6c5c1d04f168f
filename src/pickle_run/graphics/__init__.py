"""Graphics: sprite loading, text helpers and the frame renderer."""

from pickle_run.graphics.renderer import Renderer
from pickle_run.graphics.sprites import SpriteLoader, make_pickle_sprite
from pickle_run.graphics.text import FontCache, draw_centered_text, draw_rotated_text

__all__ = [
    "Renderer",
    "SpriteLoader",
    "make_pickle_sprite",
    "FontCache",
    "draw_centered_text",
    "draw_rotated_text",
]

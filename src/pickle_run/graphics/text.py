"""Text drawing helpers.

Positions follow canvas conventions: x is the horizontal center of the
text and y is its baseline.
"""

from typing import Dict, Optional, Tuple
import math

import pygame


Color = Tuple[int, int, int]


class FontCache:
    """One pygame font per pixel size."""

    def __init__(self, family: Optional[str] = None):
        self.family = family
        self._fonts: Dict[int, pygame.font.Font] = {}

    def get(self, size: float) -> pygame.font.Font:
        px = max(1, int(round(size)))
        font = self._fonts.get(px)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            if self.family:
                font = pygame.font.SysFont(self.family, px)
            else:
                font = pygame.font.Font(None, px)
            self._fonts[px] = font
        return font


def draw_centered_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    x: float,
    y: float,
    color: Color,
) -> pygame.Rect:
    """Draw text centered on x with its baseline at y."""
    text_surface = font.render(text, True, color)
    rect = text_surface.get_rect(midtop=(int(x), int(y) - font.get_ascent()))
    surface.blit(text_surface, rect)
    return rect


def draw_rotated_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    x: float,
    y: float,
    angle: float,
    color: Color,
) -> pygame.Rect:
    """Draw text rotated clockwise by angle (radians) around its baseline center (x, y)."""
    text_surface = font.render(text, True, color)
    # pygame rotates counter-clockwise in degrees, about the surface center
    rotated = pygame.transform.rotate(text_surface, -math.degrees(angle))

    # Baseline center to surface center, turned with the text
    offset = text_surface.get_height() / 2 - font.get_ascent()
    cx = x - offset * math.sin(angle)
    cy = y + offset * math.cos(angle)
    rect = rotated.get_rect(center=(round(cx), round(cy)))
    surface.blit(rotated, rect)
    return rect

"""
Frame renderer.

Draws one frame of the session onto a pygame surface. Rendering only
reads the session; all movement happens in GameSession.update().
"""

import logging

import pygame

from pickle_run.config.theme import Theme
from pickle_run.core.state import GameState
from pickle_run.game.session import GameSession
from pickle_run.graphics.sprites import SpriteLoader
from pickle_run.graphics.text import FontCache, draw_centered_text, draw_rotated_text

logger = logging.getLogger(__name__)


class Renderer:
    """Draws the START, PLAYING and WIN screens."""

    def __init__(self, theme: Theme | None = None, sprites: SpriteLoader | None = None):
        self.theme = theme or Theme()
        self.sprites = sprites or SpriteLoader(None)
        self.fonts = FontCache(self.theme.fonts.family)

        colors = self.theme.colors
        self.background = colors.to_rgb("background")
        self.text_color = colors.to_rgb("text")
        self.player_color = colors.to_rgb("player")

    def render(self, surface: pygame.Surface, session: GameSession) -> None:
        """Draw the current state of session onto surface."""
        surface.fill(self.background)

        state = session.state
        if state == GameState.START:
            self._render_start(surface)
        elif state == GameState.WIN:
            self._render_win(surface, session)
        else:
            self._render_playing(surface, session)

    def _render_start(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        font = self.fonts.get(self.theme.fonts.instructions)
        lines = self.theme.messages.start_lines

        # Lines are 40px apart, centered on the middle of the screen
        top = h / 2 - 20 * (len(lines) - 1)
        for i, line in enumerate(lines):
            draw_centered_text(surface, font, line, w / 2, top + 40 * i, self.text_color)

    def _render_win(self, surface: pygame.Surface, session: GameSession) -> None:
        w, h = surface.get_size()
        fonts = self.theme.fonts
        messages = self.theme.messages

        for particle in session.confetti:
            draw_rotated_text(
                surface,
                self.fonts.get(particle.size),
                particle.text,
                particle.x,
                particle.y,
                particle.rotation,
                self.text_color,
            )

        draw_centered_text(surface, self.fonts.get(fonts.title), messages.win_title,
                           w / 2, h * 0.35, self.text_color)
        draw_centered_text(surface, self.fonts.get(fonts.label), messages.win_label,
                           w / 2, h * 0.48, self.text_color)
        draw_centered_text(surface, self.fonts.get(fonts.code), messages.win_code,
                           w / 2, h * 0.58, self.text_color)

    def _render_playing(self, surface: pygame.Surface, session: GameSession) -> None:
        player = session.player
        pygame.draw.circle(
            surface,
            self.player_color,
            (int(player.x), int(player.y)),
            int(player.radius),
        )

        for pickle in session.collectibles:
            if pickle.collected:
                continue
            size = int(pickle.size)
            sprite = self.sprites.get(size)
            if sprite is None:
                continue  # still loading
            surface.blit(sprite, (int(pickle.x - size / 2), int(pickle.y - size / 2)))

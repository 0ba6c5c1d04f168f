"""
Main game window using pygame.

Owns the frame driver: translate input, tick the session, render,
present, wait for the next frame.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass

from ..config.settings import DisplaySettings
from ..core.events import EventBus, Event, EventType, jump_event, resize_event, tick_event
from ..game.session import GameSession
from ..graphics.renderer import Renderer

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_RETURN)


@dataclass
class WindowConfig:
    """Game window configuration."""
    width: int = 960
    height: int = 640
    title: str = "Pickle Run"
    fullscreen: bool = False
    resizable: bool = True
    fps: int = 60
    show_debug: bool = False

    # Debug overlay
    debug_color: tuple[int, int, int] = (58, 58, 74)

    @classmethod
    def from_settings(cls, display: DisplaySettings, debug: bool = False) -> "WindowConfig":
        return cls(
            width=display.width,
            height=display.height,
            title=display.title,
            fullscreen=display.fullscreen,
            resizable=display.resizable,
            fps=display.fps,
            show_debug=debug,
        )


class GameWindow:
    """
    The single game window.

    Input Mapping:
        MOUSE / TOUCH: Jump (first tap starts the run)
        SPACE, UP, RETURN: Jump
        D: Toggle debug overlay
        S: Capture screenshot
        F: Toggle fullscreen
        ESC / Q: Exit
    """

    def __init__(
        self,
        session: GameSession,
        renderer: Renderer,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.session = session
        self.renderer = renderer
        self.event_bus = event_bus or EventBus()

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = self.config.show_debug
        self._windowed_size = (self.config.width, self.config.height)

        self.session.attach(self.event_bus)

        logger.info("GameWindow created")

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def _display_flags(self) -> int:
        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN
        elif self.config.resizable:
            flags |= pygame.RESIZABLE
        return flags

    def _init_pygame(self) -> None:
        """Initialize display and fonts, create window.

        The mixer is left closed; the audio engine opens it on the first tap.
        """
        pygame.display.init()
        pygame.font.init()
        pygame.display.set_caption(self.config.title)

        if self.config.fullscreen:
            info = pygame.display.Info()
            size = (info.current_w, info.current_h)
        else:
            size = (self.config.width, self.config.height)

        self._screen = pygame.display.set_mode(size, self._display_flags())
        self._clock = pygame.time.Clock()

        # Viewport follows whatever size the platform actually gave us
        self.event_bus.emit(resize_event(*self._screen.get_size()))

        self.renderer.sprites.start()

        logger.info(f"Pygame initialized: {self._screen.get_width()}x{self._screen.get_height()}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Translate one pygame event into game events."""
        if event.type == pygame.QUIT:
            self._running = False

        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Touch screens also synthesize mouse events; FINGERDOWN handles those
            if not getattr(event, "touch", False):
                self.event_bus.emit(jump_event(source="mouse"))

        elif event.type == pygame.FINGERDOWN:
            self.event_bus.emit(jump_event(source="touch"))

        elif event.type == pygame.VIDEORESIZE:
            self._on_resize(event.w, event.h)

        elif event.type == pygame.WINDOWSIZECHANGED:
            # Carries the new size in x, y
            self._on_resize(event.x, event.y)

        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event)

    def _on_resize(self, width: int, height: int) -> None:
        self._screen = pygame.display.get_surface() or self._screen
        self.event_bus.emit(resize_event(width, height))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key in JUMP_KEYS:
            self.event_bus.emit(jump_event(source="keyboard"))
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()
        elif key == pygame.K_f:
            self._toggle_fullscreen()

    def _render(self) -> None:
        """Render the frame and present it."""
        if not self._screen:
            return

        self.renderer.render(self._screen, self.session)

        if self._show_debug:
            self._render_debug_overlay()

        pygame.display.flip()

    def _render_debug_overlay(self) -> None:
        """Render FPS and run counters in the top-left corner."""
        session = self.session
        font = self.renderer.fonts.get(self.renderer.theme.fonts.debug)

        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._frame_count}",
            f"State: {session.state.name}",
            f"Pickles: {session.collected}/{len(session.collectibles)}",
            f"Speed: {session.scroll_speed:.2f}",
            f"Jumps: {session.player.jumps}",
            f"Viewport: {session.viewport.width}x{session.viewport.height}",
        ]

        y = 8
        for line in lines:
            text_surface = font.render(line, True, self.config.debug_color)
            self._screen.blit(text_surface, (8, y))
            y += font.get_linesize()

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    def _toggle_fullscreen(self) -> None:
        """Toggle fullscreen mode."""
        self.config.fullscreen = not self.config.fullscreen

        if self.config.fullscreen:
            self._windowed_size = self._screen.get_size() if self._screen else self._windowed_size
            info = pygame.display.Info()
            size = (info.current_w, info.current_h)
        else:
            size = self._windowed_size

        self._screen = pygame.display.set_mode(size, self._display_flags())
        self.event_bus.emit(resize_event(*self._screen.get_size()))
        logger.info(f"Fullscreen: {self.config.fullscreen}")

    async def run(self) -> None:
        """Main game loop. Runs until the window is closed."""
        self._init_pygame()
        self._running = True

        logger.info("Game loop started")

        while self._running:
            self._handle_events()

            # Physics step
            delta = self._clock.get_time() / 1000.0 if self._clock else 0.0
            self.event_bus.emit(tick_event(delta, self._frame_count))

            # Render step
            self._render()

            # Wait for the next refresh
            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.session.detach()
        self.session.audio.cleanup()
        pygame.quit()
        logger.info("Game window closed")

    def stop(self) -> None:
        """Stop the game loop after the current frame."""
        self._running = False

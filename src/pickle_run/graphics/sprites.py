"""
Collectible sprite loading.

The sprite image is loaded on a background thread so the first frames
never wait on disk. Until it is ready the renderer simply skips the
pickles. Without an image file a pickle is drawn procedurally instead.
"""

from pathlib import Path
from typing import Dict, Optional
import logging
import threading

import pygame

logger = logging.getLogger(__name__)

# Procedural pickle palette
PICKLE_BODY = (92, 160, 58)
PICKLE_DARK = (46, 96, 30)
PICKLE_BUMP = (150, 204, 96)


def make_pickle_sprite(size: int = 64) -> pygame.Surface:
    """Draw a pickle on a transparent square surface."""
    surface = pygame.Surface((size, size), pygame.SRCALPHA)

    # Body is a tilted-looking long oval
    body = pygame.Rect(0, 0, int(size * 0.56), int(size * 0.92))
    body.center = (size // 2, size // 2)
    pygame.draw.ellipse(surface, PICKLE_DARK, body)
    pygame.draw.ellipse(surface, PICKLE_BODY, body.inflate(-max(2, size // 16), -max(2, size // 16)))

    # Bumps
    bump_r = max(1, size // 18)
    for fx, fy in ((0.42, 0.25), (0.58, 0.38), (0.44, 0.52), (0.57, 0.66), (0.45, 0.78)):
        pygame.draw.circle(surface, PICKLE_BUMP, (int(size * fx), int(size * fy)), bump_r)

    return pygame.transform.rotate(surface, -30)


class SpriteLoader:
    """Loads one sprite asynchronously and caches scaled copies."""

    def __init__(self, path: Path | None, fallback_size: int = 64):
        self.path = path
        self.fallback_size = fallback_size
        self._surface: Optional[pygame.Surface] = None
        self._scaled: Dict[int, pygame.Surface] = {}
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._surface is not None

    @property
    def is_loading(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Begin loading in the background."""
        if self._thread is not None or self.is_ready:
            return
        self._thread = threading.Thread(target=self.load, name="sprite-loader", daemon=True)
        self._thread.start()

    def load(self) -> pygame.Surface:
        """Load synchronously. Falls back to the procedural sprite."""
        surface = None
        if self.path is not None and self.path.exists():
            try:
                surface = pygame.image.load(str(self.path))
                logger.info(f"Loaded sprite: {self.path}")
            except (pygame.error, OSError) as e:
                logger.warning(f"Failed to load sprite {self.path}: {e}")

        if surface is None:
            logger.info("Using procedural pickle sprite")
            surface = make_pickle_sprite(self.fallback_size)

        with self._lock:
            self._surface = surface
            self._scaled.clear()
        return surface

    def get(self, size: int) -> Optional[pygame.Surface]:
        """Sprite scaled to size x size, or None while still loading."""
        with self._lock:
            if self._surface is None:
                return None
            scaled = self._scaled.get(size)
            if scaled is None:
                scaled = pygame.transform.scale(self._surface, (size, size))
                self._scaled[size] = scaled
            return scaled

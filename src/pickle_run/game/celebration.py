"""Win-screen confetti: words that drift up forever."""

from typing import List, Sequence
import logging
import math
import random

from pickle_run.core.viewport import Viewport
from pickle_run.game.entities import ConfettiParticle

logger = logging.getLogger(__name__)

# Particles above this y are recycled to height + WRAP_OFFSET
TOP_THRESHOLD = -20
WRAP_OFFSET = 20


class Celebration:
    """Spawns and recycles confetti particles.

    Particles never die: once one rises past the top it re-enters from
    below, so the effect runs until the window closes.
    """

    def __init__(
        self,
        words: Sequence[str],
        count: int = 35,
        rng: random.Random | None = None,
    ):
        self.words = list(words)
        self.count = count
        self.particles: List[ConfettiParticle] = []
        self._rng = rng or random.Random()

    def spawn(self, viewport: Viewport) -> None:
        """Replace all particles with a fresh batch below the screen."""
        rng = self._rng
        w, h = viewport.width, viewport.height

        self.particles = [
            ConfettiParticle(
                text=rng.choice(self.words),
                x=rng.random() * w,
                y=h + rng.random() * h,
                speed=0.8 + rng.random() * 1.5,
                size=12 + rng.random() * 10,
                rotation=rng.random() * math.pi * 2,
            )
            for _ in range(self.count)
        ]
        logger.debug(f"Spawned {len(self.particles)} confetti particles")

    def update(self, viewport: Viewport) -> None:
        """Advance one frame."""
        for p in self.particles:
            p.y -= p.speed
            if p.y < TOP_THRESHOLD:
                p.y = viewport.height + WRAP_OFFSET

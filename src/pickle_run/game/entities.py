"""Player, pickles and confetti, plus the factory that lays out a run."""

from dataclasses import dataclass
import math
import random

from pickle_run.config.settings import GameplaySettings
from pickle_run.core.viewport import Viewport


@dataclass
class Player:
    """The runner. Stays at a fixed x; only y moves."""
    x: float = 0.0
    y: float = 0.0
    radius: float = 15.0
    vy: float = 0.0
    jumps: int = 0


@dataclass
class Collectible:
    """A pickle scrolling toward the player."""
    x: float
    base_y: float
    bob_phase: float
    size: float = 40.0
    y: float = 0.0
    collected: bool = False

    @property
    def escaped(self) -> bool:
        """Fully past the left edge of the screen."""
        return self.x + self.size < 0


@dataclass
class ConfettiParticle:
    """A rising word shown on the win screen."""
    text: str
    x: float
    y: float
    speed: float     # pixels per frame, upward
    size: float      # font size in pixels
    rotation: float  # radians


def place_player(player: Player, viewport: Viewport, gameplay: GameplaySettings) -> None:
    """Put the player on the ground at its run position, at rest."""
    player.x = viewport.width * gameplay.player_x_ratio
    player.y = viewport.height * gameplay.ground_ratio
    player.radius = gameplay.player_radius
    player.vy = 0.0
    player.jumps = 0


def create_collectibles(
    viewport: Viewport,
    gameplay: GameplaySettings,
    rng: random.Random,
) -> list[Collectible]:
    """Lay out a run's pickles.

    Pickle i (1-based) starts at spacing * i, with spacing a fraction of
    the viewport width, and a random height inside the safe band.
    """
    spacing = viewport.width * gameplay.spacing_ratio
    min_y = viewport.height * gameplay.band_min_ratio
    max_y = viewport.height * gameplay.band_max_ratio

    return [
        Collectible(
            x=spacing * (i + 1),
            base_y=min_y + rng.random() * (max_y - min_y),
            bob_phase=rng.random() * math.pi * 2,
            size=gameplay.collectible_size,
        )
        for i in range(gameplay.collectible_count)
    ]

"""Per-frame movement and collision helpers.

All velocities are per frame; the game runs at a fixed frame rate.
"""

import math
from typing import Iterable, List

from pickle_run.config.settings import GameplaySettings
from pickle_run.game.entities import Player, Collectible


def apply_gravity(player: Player, gameplay: GameplaySettings, ground_y: float) -> bool:
    """Integrate one frame of gravity and clamp to the ground.

    Returns True if the player landed (was clamped) this frame.
    """
    player.vy += gameplay.gravity
    player.y += player.vy

    if player.y > ground_y:
        player.y = ground_y
        player.vy = 0.0
        player.jumps = 0  # landing re-arms both jumps
        return True
    return False


def try_jump(player: Player, gameplay: GameplaySettings) -> bool:
    """Jump if any jumps remain. Returns True if the jump happened."""
    if player.jumps >= gameplay.max_jumps:
        return False
    player.vy = gameplay.jump_strength
    player.jumps += 1
    return True


def advance_collectibles(
    collectibles: Iterable[Collectible],
    scroll_speed: float,
    gameplay: GameplaySettings,
) -> None:
    """Scroll every pickle left and update its bob."""
    for c in collectibles:
        c.x -= scroll_speed
        c.bob_phase += gameplay.bob_step
        c.y = c.base_y + math.sin(c.bob_phase) * gameplay.bob_amplitude


def touches(player: Player, collectible: Collectible) -> bool:
    """Circle check between player and pickle centers."""
    dist = math.hypot(player.x - collectible.x, player.y - collectible.y)
    return dist < player.radius + collectible.size / 2


def find_touching(player: Player, collectibles: Iterable[Collectible]) -> List[Collectible]:
    """Uncollected pickles the player is touching, in run order."""
    return [c for c in collectibles if not c.collected and touches(player, c)]


def any_escaped(collectibles: Iterable[Collectible]) -> bool:
    """True if an uncollected pickle has left the screen on the left."""
    return any(not c.collected and c.escaped for c in collectibles)

"""Game logic: entities, physics, celebration and the session tying them together."""

from pickle_run.game.entities import Player, Collectible, ConfettiParticle
from pickle_run.game.celebration import Celebration
from pickle_run.game.session import GameSession

__all__ = [
    "Player",
    "Collectible",
    "ConfettiParticle",
    "Celebration",
    "GameSession",
]

"""Model package for the player app."""

from .player import Player, Position


__all__ = [
    "Player",
    "Position",
]

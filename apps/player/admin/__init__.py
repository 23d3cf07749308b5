"""Package contains the admin classes for the player app."""

from .player_admin import PlayerAdmin


__all__ = [
    "PlayerAdmin",
]

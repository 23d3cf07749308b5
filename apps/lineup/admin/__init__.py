"""Package contains the admin classes for the lineup app."""

from .team_player_position_admin import TeamPlayerPositionAdmin


__all__ = [
    "TeamPlayerPositionAdmin",
]

"""Package contains the models for the lineup app."""

from .team_player_position import TeamPlayerPosition


__all__ = [
    "TeamPlayerPosition",
]

"""Package contains the admin classes for the schedule app."""

from .match_admin import MatchAdmin, MatchAvailablePlayerAdmin, PlayerMatchStatsAdmin


__all__ = [
    "MatchAdmin",
    "MatchAvailablePlayerAdmin",
    "PlayerMatchStatsAdmin",
]

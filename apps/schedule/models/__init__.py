"""Package contains the models for the schedule app."""

from .match import Match, MatchStatus
from .match_available_player import MatchAvailablePlayer
from .player_match_stats import PlayerMatchStats


__all__ = [
    "Match",
    "MatchAvailablePlayer",
    "MatchStatus",
    "PlayerMatchStats",
]

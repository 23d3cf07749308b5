"""Player rating formula."""

from __future__ import annotations

import math


BASE_RATING = 80
GOAL_WEIGHT = 0.3
ASSIST_WEIGHT = 0.2
SAVE_WEIGHT = 0.3
GOAL_SAVED_WEIGHT = 0.2

RATING_STAT_FIELDS = ("goals", "assists", "saves", "goals_saved")


def _round_js(value: float) -> int:
    """Round half up like JS `Math.round` (Python's `round` is banker's)."""
    return math.floor(value + 0.5)


def compute_rating(
    *,
    goals: int = 0,
    assists: int = 0,
    saves: int = 0,
    goals_saved: int = 0,
) -> int:
    """Compute a player's rating from their cumulative stats.

    Returns:
        int: ``round(80 + 0.3*goals + 0.2*assists + 0.3*saves + 0.2*goals_saved)``

    """
    return _round_js(
        BASE_RATING
        + goals * GOAL_WEIGHT
        + assists * ASSIST_WEIGHT
        + saves * SAVE_WEIGHT
        + goals_saved * GOAL_SAVED_WEIGHT
    )

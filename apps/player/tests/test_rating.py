"""Tests for the player rating formula."""

from __future__ import annotations

import pytest

from apps.player.services.rating import compute_rating


def test_rating_defaults_to_base_without_stats() -> None:
    """A player with no stats is rated 80."""
    assert compute_rating() == 80  # noqa: PLR2004


@pytest.mark.parametrize(
    ("stats", "expected"),
    [
        ({"goals": 10}, 83),
        ({"assists": 10}, 82),
        ({"saves": 10, "goals_saved": 5}, 84),
        ({"goals": 1, "assists": 1, "saves": 1, "goals_saved": 1}, 81),
    ],
)
def test_rating_applies_linear_weights(stats: dict[str, int], expected: int) -> None:
    """Each stat contributes its fixed weight."""
    assert compute_rating(**stats) == expected


def test_rating_rounds_half_up() -> None:
    """Halves round up (80 + 5 * 0.3 = 81.5 -> 82)."""
    assert compute_rating(goals=5) == 82  # noqa: PLR2004

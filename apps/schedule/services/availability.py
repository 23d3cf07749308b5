"""Which players can still be drafted in a match.

``available_players`` is the only place that decides this; the
available-players endpoint and pick validation both go through it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from typing import Protocol
from uuid import UUID

from apps.draft.models import DraftHistoryEntry
from apps.player.models import Player
from apps.schedule.models import Match, MatchAvailablePlayer


logger = logging.getLogger(__name__)


class AvailabilityRow(Protocol):
    """Anything shaped like a ``MatchAvailablePlayer`` row."""

    player_id: UUID
    is_available: bool


class PickRow(Protocol):
    """Anything shaped like a ``DraftHistoryEntry`` row."""

    player_id: UUID


def available_players(
    all_players: Sequence[Player],
    availability_rows: Iterable[AvailabilityRow],
    history_rows: Iterable[PickRow],
) -> list[Player]:
    """Return the players of ``all_players`` that may still be picked.

    - With at least one availability row, only players whose row is marked
      available are in the pool.
    - Without any availability rows, every player is in the pool.
    - Players that were already picked are removed.

    The order of ``all_players`` is preserved.

    Returns:
        list[Player]: The remaining pool.

    """
    rows = list(availability_rows)
    picked = {row.player_id for row in history_rows}

    if rows:
        allowed = {row.player_id for row in rows if row.is_available}
        pool = [player for player in all_players if player.id_uuid in allowed]
    else:
        pool = list(all_players)

    return [player for player in pool if player.id_uuid not in picked]


def get_available_players(match: Match | None) -> list[Player]:
    """Load roster, availability and draft history, then compute the pool.

    ``match=None`` means the match-less draft: there is no availability pool,
    so only already-picked players are excluded.

    Returns:
        list[Player]: Available players ordered by name.

    """
    all_players = list(Player.objects.order_by("name"))
    if match is None:
        availability: list[MatchAvailablePlayer] = []
        history = DraftHistoryEntry.objects.filter(match__isnull=True)
    else:
        availability = list(
            MatchAvailablePlayer.objects.filter(match=match).only(
                "player_id", "is_available"
            )
        )
        history = DraftHistoryEntry.objects.filter(match=match)

    pool = available_players(all_players, availability, history.only("player_id"))
    logger.debug(
        "Available players for match %s: %s of %s",
        getattr(match, "id_uuid", None),
        len(pool),
        len(all_players),
    )
    return pool

"""Lineup placement: which player stands where for each team.

Placements are scoped by match; ``match_id=None`` addresses the match-less
placements.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
import logging
import math
from typing import Any, TypedDict
from uuid import UUID

from django.db import transaction
from django.db.models import Q

from apps.lineup.models import TeamPlayerPosition
from apps.player.models import Player, Position
from apps.schedule.models import Match
from apps.team.models import Team


logger = logging.getLogger(__name__)

POSITIONS: tuple[str, ...] = tuple(Position.values)
OUTFIELD_POSITIONS: tuple[str, ...] = tuple(p for p in POSITIONS if p != Position.SUB)


class LineupError(ValueError):
    """Raised when a lineup operation receives unusable input."""

    def __init__(self, message: str, *, code: str = "bad_request") -> None:
        """Create an error that can be mapped to an API response."""
        super().__init__(message)
        self.code = code


class LineupPlayerStats(TypedDict):
    """Cumulative stats shown on a lineup card."""

    goals: int
    assists: int
    saves: int
    goals_saved: int


class LineupPlayer(TypedDict):
    """A player as placed in a lineup slot."""

    id: str
    name: str
    rating: int
    position: str | None
    team: str
    stats: LineupPlayerStats
    number: int | None
    nickname: str | None


@dataclass(frozen=True, slots=True)
class LineupSlots:
    """The seven slots of a team lineup.

    ``GK``..``ST`` are the outfield slots, ``SUB`` is the bench. Each slot
    holds its players ordered by ``position_order``.
    """

    GK: tuple[LineupPlayer, ...] = ()
    CL: tuple[LineupPlayer, ...] = ()
    CR: tuple[LineupPlayer, ...] = ()
    ML: tuple[LineupPlayer, ...] = ()
    MR: tuple[LineupPlayer, ...] = ()
    ST: tuple[LineupPlayer, ...] = ()
    SUB: tuple[LineupPlayer, ...] = ()

    @classmethod
    def from_mapping(
        cls,
        slots: Mapping[str, Iterable[LineupPlayer]],
    ) -> LineupSlots:
        """Build slots from a mapping keyed by position code.

        Returns:
            LineupSlots: The validated slots.

        Raises:
            ValueError: If a position key is missing or unknown.

        """
        keys = set(slots)
        missing = [p for p in POSITIONS if p not in keys]
        unknown = sorted(keys - set(POSITIONS))
        if missing or unknown:
            msg = f"Invalid lineup slots (missing={missing}, unknown={unknown})"
            raise ValueError(msg)
        return cls(**{p: tuple(slots[p]) for p in POSITIONS})

    def as_dict(self) -> dict[str, list[LineupPlayer]]:
        """Return the slots as ``{position: [players]}``."""
        return {f.name: list(getattr(self, f.name)) for f in fields(self)}

    def starters(self) -> list[LineupPlayer]:
        """Return the players of every outfield slot."""
        return [player for p in OUTFIELD_POSITIONS for player in getattr(self, p)]


def _parse_uuid(value: UUID | str, label: str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as exc:
        msg = f"Invalid {label}"
        raise LineupError(msg) from exc


def _resolve_match(match_id: UUID | str | None) -> Match | None:
    if match_id is None or match_id == "":
        return None
    match = Match.objects.filter(id_uuid=_parse_uuid(match_id, "matchId")).first()
    if match is None:
        msg = "Match not found"
        raise LineupError(msg, code="not_found")
    return match


def _scope(match: Match | None) -> Q:
    if match is None:
        return Q(match__isnull=True)
    return Q(match=match)


def save_position(  # noqa: PLR0913
    team_id: str,
    player_id: UUID | str,
    position: str,
    order: int = 0,
    match_id: UUID | str | None = None,
) -> TeamPlayerPosition:
    """Place a player in a team slot, updating an existing placement in place.

    The placement is keyed by ``(team, player, match)``. Placements of the same
    player on the other team are not touched; callers move players between
    teams with ``remove_player`` first.

    Returns:
        TeamPlayerPosition: The stored placement.

    Raises:
        LineupError: If the position is unknown or a referenced row is missing.

    """
    if position not in POSITIONS:
        msg = f"Invalid position: {position}"
        raise LineupError(msg)
    player_uuid = _parse_uuid(player_id, "playerId")

    with transaction.atomic():
        match = _resolve_match(match_id)
        if not Team.objects.filter(id=team_id).exists():
            msg = "Team not found"
            raise LineupError(msg, code="not_found")
        if not Player.objects.filter(id_uuid=player_uuid).exists():
            msg = "Player not found"
            raise LineupError(msg, code="not_found")

        placement, created = TeamPlayerPosition.objects.update_or_create(
            team_id=team_id,
            player_id=player_uuid,
            match=match,
            defaults={"position": position, "position_order": order},
        )

    logger.info(
        "%s placement: match %s, team %s, %s -> %s (%s)",
        "New" if created else "Updated",
        getattr(match, "id_uuid", None),
        team_id,
        player_uuid,
        position,
        order,
    )
    return placement


def remove_player(
    team_id: str,
    player_id: UUID | str,
    match_id: UUID | str | None = None,
) -> int:
    """Remove a player's placement from a team.

    Returns:
        int: Number of placements deleted (0 when there was none).

    """
    player_uuid = _parse_uuid(player_id, "playerId")
    match = _resolve_match(match_id)
    deleted, _ = TeamPlayerPosition.objects.filter(
        _scope(match),
        team_id=team_id,
        player_id=player_uuid,
    ).delete()
    logger.info(
        "Removed %s from team %s in match %s (%s rows)",
        player_uuid,
        team_id,
        getattr(match, "id_uuid", None),
        deleted,
    )
    return deleted


def reset_lineups(match_id: UUID | str | None = None) -> int:
    """Delete every placement of the match (or every match-less placement).

    Returns:
        int: Number of placements deleted.

    """
    match = _resolve_match(match_id)
    deleted, _ = TeamPlayerPosition.objects.filter(_scope(match)).delete()
    logger.info(
        "Reset lineups for match %s (%s rows)",
        getattr(match, "id_uuid", None),
        deleted,
    )
    return deleted


def _lineup_player(player: Player, team_id: str) -> LineupPlayer:
    return {
        "id": str(player.id_uuid),
        "name": player.name,
        "rating": player.rating,
        "position": player.position,
        "team": team_id,
        "stats": {
            "goals": player.goals,
            "assists": player.assists,
            "saves": player.saves,
            "goals_saved": player.goals_saved,
        },
        "number": player.number,
        "nickname": player.nickname,
    }


def load_lineups(match_id: UUID | str | None = None) -> dict[str, dict[str, Any]]:
    """Return every team with its players grouped by slot.

    Returns:
        dict[str, dict[str, Any]]: ``{team_id: {"id", "name", "players":
        LineupSlots}}``; teams without placements get empty slots.

    """
    match = _resolve_match(match_id)
    placements = (
        TeamPlayerPosition.objects.filter(_scope(match))
        .select_related("player")
        .order_by("position_order", "created_at")
    )

    grouped: dict[str, dict[str, list[LineupPlayer]]] = {}
    for placement in placements:
        team_id = placement.team_id  # type: ignore[attr-defined]
        slots = grouped.setdefault(team_id, {p: [] for p in POSITIONS})
        slots[placement.position].append(_lineup_player(placement.player, team_id))

    empty = {p: [] for p in POSITIONS}
    return {
        team.id: {
            "id": team.id,
            "name": team.name,
            "players": LineupSlots.from_mapping(grouped.get(team.id, empty)),
        }
        for team in Team.objects.order_by("id")
    }


def team_rating(slots: LineupSlots) -> float | None:
    """Average rating of the outfield players, rounded to one decimal.

    Returns:
        float | None: The average, or ``None`` when no outfield slot is filled.

    """
    starters = slots.starters()
    if not starters:
        return None
    average = sum(player["rating"] for player in starters) / len(starters)
    return math.floor(average * 10.0 + 0.5) / 10.0

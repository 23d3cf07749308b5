"""Match lifecycle operations that touch several tables at once."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
from uuid import UUID

from django.db import transaction

from apps.draft.models import DraftHistoryEntry, DraftState
from apps.lineup.models import TeamPlayerPosition
from apps.player.models import Player
from apps.schedule.models import (
    Match,
    MatchAvailablePlayer,
    MatchStatus,
    PlayerMatchStats,
)
from apps.team.models import Team


logger = logging.getLogger(__name__)


class MatchAdminError(ValueError):
    """Raised when a match operation receives unusable input."""

    def __init__(self, message: str, *, code: str = "bad_request") -> None:
        """Create an error that can be mapped to an API response."""
        super().__init__(message)
        self.code = code


@dataclass(frozen=True, slots=True)
class StatsInput:
    """Per-match stats for one player."""

    player_id: UUID | str
    team_id: str
    goals: int = 0
    assists: int = 0
    saves: int = 0
    goals_saved: int = 0


def _existing_player_ids(player_ids: Iterable[UUID | str]) -> list[UUID]:
    wanted = {str(player_id) for player_id in player_ids}
    found = list(
        Player.objects.filter(id_uuid__in=wanted).values_list("id_uuid", flat=True)
    )
    missing = wanted - {str(player_id) for player_id in found}
    if missing:
        msg = f"Unknown players: {', '.join(sorted(missing))}"
        raise MatchAdminError(msg)
    return found


def create_match(
    *,
    name: str,
    date: str,
    player_ids: Iterable[UUID | str],
    location: str | None = None,
) -> Match:
    """Create a PENDING match together with its availability pool.

    Returns:
        Match: The new match.

    Raises:
        MatchAdminError: If a player id does not exist.

    """
    with transaction.atomic():
        ids = _existing_player_ids(player_ids)
        match = Match.objects.create(
            name=name,
            date=date,
            location=location or None,
            status=MatchStatus.PENDING,
        )
        MatchAvailablePlayer.objects.bulk_create(
            [
                MatchAvailablePlayer(match=match, player_id=player_id)
                for player_id in ids
            ]
        )

    logger.info("Created match %s with %s available players", match.id_uuid, len(ids))
    return match


def set_available_players(match: Match, player_ids: Iterable[UUID | str]) -> None:
    """Make exactly ``player_ids`` available for ``match``.

    Existing rows for other players are kept but marked unavailable; rows are
    added for players that had none.

    Raises:
        MatchAdminError: If a player id does not exist.

    """
    with transaction.atomic():
        ids = _existing_player_ids(player_ids)
        rows = MatchAvailablePlayer.objects.filter(match=match)
        rows.exclude(player_id__in=ids).update(is_available=False)
        rows.filter(player_id__in=ids).update(is_available=True)

        known = set(rows.values_list("player_id", flat=True))
        MatchAvailablePlayer.objects.bulk_create(
            [
                MatchAvailablePlayer(match=match, player_id=player_id)
                for player_id in ids
                if player_id not in known
            ]
        )

    logger.info(
        "Updated availability for match %s (%s available)", match.id_uuid, len(ids)
    )


def reset_match(match: Match) -> None:
    """Clear lineups and draft history and deactivate the draft of ``match``.

    Availability and stats are kept.
    """
    with transaction.atomic():
        lineups, _ = TeamPlayerPosition.objects.filter(match=match).delete()
        picks, _ = DraftHistoryEntry.objects.filter(match=match).delete()
        DraftState.objects.filter(match=match).update(
            is_active=False,
            current_team=None,
        )

    logger.info(
        "Reset match %s (%s placements, %s picks removed)",
        match.id_uuid,
        lineups,
        picks,
    )


def delete_match(match: Match) -> None:
    """Delete ``match`` and everything that belongs to it."""
    match_id = match.id_uuid
    with transaction.atomic():
        DraftHistoryEntry.objects.filter(match=match).delete()
        TeamPlayerPosition.objects.filter(match=match).delete()
        DraftState.objects.filter(match=match).delete()
        MatchAvailablePlayer.objects.filter(match=match).delete()
        PlayerMatchStats.objects.filter(match=match).delete()
        match.delete()

    logger.info("Deleted match %s", match_id)


def save_player_stats(match: Match, stats: StatsInput) -> PlayerMatchStats:
    """Insert or update the stats of one player in ``match``.

    Returns:
        PlayerMatchStats: The stored row.

    Raises:
        MatchAdminError: If the player or team does not exist.

    """
    if not Player.objects.filter(id_uuid=stats.player_id).exists():
        msg = "Player not found"
        raise MatchAdminError(msg, code="not_found")
    if not Team.objects.filter(id=stats.team_id).exists():
        msg = "Team not found"
        raise MatchAdminError(msg, code="not_found")

    row, created = PlayerMatchStats.objects.update_or_create(
        match=match,
        player_id=stats.player_id,
        defaults={
            "team_id": stats.team_id,
            "goals": stats.goals,
            "assists": stats.assists,
            "saves": stats.saves,
            "goals_saved": stats.goals_saved,
        },
    )
    logger.info(
        "%s stats for player %s in match %s",
        "Created" if created else "Updated",
        stats.player_id,
        match.id_uuid,
    )
    return row

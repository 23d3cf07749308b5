"""Draft (triaje) coordinator.

Two teams take turns picking players for a match:

- ``start_draft`` wipes the match's lineups and picks, chooses a random
  starting team and activates the draft.
- ``pick_player`` records a pick for the team whose turn it is and hands the
  turn to the other team.
- ``end_draft`` deactivates the draft.
- ``get_draft_state`` / ``get_draft_history`` are read-only and never fail.

Every mutating operation runs in one transaction. Picks lock the match's
``DraftState`` row (``select_for_update``), so concurrent picks for the same
match are applied one after the other and each re-checks the turn once it
holds the lock.

Operations return a ``DraftResult`` instead of raising; database errors are
logged and reported as a ``persistence`` failure.

``match_id=None`` selects the match-less draft.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
import functools
import logging
import random
from typing import Any, TypeVar
from uuid import UUID

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import Max, Q

from apps.draft.models import DRAFT_STATE_KEY, DraftHistoryEntry, DraftState
from apps.lineup.models import TeamPlayerPosition
from apps.player.models import Player
from apps.schedule.models import Match
from apps.schedule.services.availability import get_available_players
from apps.team.models import Team


logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_ACTIVE_DRAFT_MESSAGE = "No active draft"
NOT_YOUR_TURN_MESSAGE = "It is not this team's turn"
PLAYER_UNAVAILABLE_MESSAGE = "Player is not available for this draft"
NOT_ENOUGH_TEAMS_MESSAGE = "At least two teams are required for the draft"
NO_ALTERNATE_TEAM_MESSAGE = "Exactly one other team is required for the draft"
PERSISTENCE_ERROR_MESSAGE = "Could not save the draft; please try again"


class DraftError(RuntimeError):
    """Raised inside the coordinator when an operation cannot be applied."""

    def __init__(self, message: str, *, code: str = "error") -> None:
        """Create an error that can be mapped to an API response."""
        super().__init__(message)
        self.code = code


@dataclass(frozen=True, slots=True)
class DraftResult:
    """Outcome of a mutating coordinator operation."""

    success: bool
    error: str | None = None
    code: str | None = None
    starting_team: str | None = None
    next_team: str | None = None

    @classmethod
    def failure(cls, exc: DraftError) -> DraftResult:
        """Build a failed result from a coordinator error.

        Returns:
            DraftResult: ``success=False`` with the error message and code.

        """
        return cls(success=False, error=str(exc), code=exc.code)


def _run(operation: str, fn: Callable[[], DraftResult]) -> DraftResult:
    """Run ``fn`` and turn coordinator and database errors into results."""
    try:
        return fn()
    except DraftError as exc:
        logger.warning("Draft %s rejected (%s): %s", operation, exc.code, exc)
        return DraftResult.failure(exc)
    except DatabaseError:
        logger.exception("Draft %s failed", operation)
        return DraftResult(
            success=False,
            error=PERSISTENCE_ERROR_MESSAGE,
            code="persistence",
        )


def _parse_uuid(value: UUID | str | None, label: str) -> UUID | None:
    if value is None or value == "":
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as exc:
        msg = f"Invalid {label}"
        raise DraftError(msg, code="bad_request") from exc


def _resolve_match(match_id: UUID | str | None) -> Match | None:
    parsed = _parse_uuid(match_id, "matchId")
    if parsed is None:
        return None
    match = Match.objects.filter(id_uuid=parsed).first()
    if match is None:
        msg = "Match not found"
        raise DraftError(msg, code="not_found")
    return match


def _scope(match: Match | None) -> Q:
    if match is None:
        return Q(match__isnull=True)
    return Q(match=match)


@functools.cache
def _seeded_rng(seed: int) -> random.Random:
    return random.Random(seed)  # noqa: S311  # nosec


def _draft_rng() -> random.Random:
    """Return the generator used to choose the starting team.

    A configured seed yields one generator per process, so successive drafts
    follow a reproducible sequence instead of repeating the first choice.
    """
    seed = getattr(settings, "TRIATAPP_DRAFT_RANDOM_SEED", None)
    if seed is None:
        return random.SystemRandom()
    return _seeded_rng(seed)


def start_draft(
    match_id: UUID | str | None = None,
    *,
    rng: random.Random | None = None,
) -> DraftResult:
    """Reset the match's draft and activate it with a random starting team.

    Lineups and picks of the match are deleted first. All effects are applied
    in a single transaction.

    Args:
        match_id: The match to draft for, or ``None`` for the match-less draft.
        rng: Random source for the starting team (defaults to system
            randomness, or a seeded generator when configured).

    Returns:
        DraftResult: ``starting_team`` holds the id of the team that picks
        first.

    """

    def _start() -> DraftResult:
        with transaction.atomic():
            match = _resolve_match(match_id)
            team_ids = list(Team.objects.order_by("id").values_list("id", flat=True))
            if len(team_ids) < 2:  # noqa: PLR2004
                raise DraftError(NOT_ENOUGH_TEAMS_MESSAGE, code="configuration")

            scope = _scope(match)
            lineups, _ = TeamPlayerPosition.objects.filter(scope).delete()
            picks, _ = DraftHistoryEntry.objects.filter(scope).delete()

            starting_team = (rng or _draft_rng()).choice(team_ids)
            DraftState.objects.update_or_create(
                key=DRAFT_STATE_KEY,
                match=match,
                defaults={"current_team_id": starting_team, "is_active": True},
            )

        logger.info(
            "Draft started for match %s: %s picks first "
            "(%s placements, %s picks cleared)",
            getattr(match, "id_uuid", None),
            starting_team,
            lineups,
            picks,
        )
        return DraftResult(success=True, starting_team=starting_team)

    return _run("start", _start)


def pick_player(
    team_id: str,
    player_id: UUID | str,
    match_id: UUID | str | None = None,
) -> DraftResult:
    """Record ``team_id`` picking ``player_id`` and pass the turn on.

    The pick is rejected without any change when the draft is inactive, when
    it is not ``team_id``'s turn, or when the player is not in the match's
    available pool.

    Returns:
        DraftResult: ``next_team`` holds the id of the team that picks next.

    """

    def _pick() -> DraftResult:
        player_uuid = _parse_uuid(player_id, "playerId")
        if player_uuid is None or not team_id:
            msg = "teamId and playerId are required"
            raise DraftError(msg, code="bad_request")

        with transaction.atomic():
            match = _resolve_match(match_id)
            scope = _scope(match)
            state = (
                DraftState.objects.select_for_update()
                .filter(scope, key=DRAFT_STATE_KEY)
                .first()
            )
            if state is None or not state.is_active:
                raise DraftError(NO_ACTIVE_DRAFT_MESSAGE, code="not_active")
            if state.current_team_id != team_id:  # type: ignore[attr-defined]
                raise DraftError(NOT_YOUR_TURN_MESSAGE, code="not_your_turn")

            if not Player.objects.filter(id_uuid=player_uuid).exists():
                msg = "Player not found"
                raise DraftError(msg, code="not_found")
            pool = get_available_players(match)
            if all(player.id_uuid != player_uuid for player in pool):
                raise DraftError(PLAYER_UNAVAILABLE_MESSAGE, code="player_unavailable")

            others = list(
                Team.objects.exclude(id=team_id).values_list("id", flat=True)[:2]
            )
            if len(others) != 1:
                raise DraftError(NO_ALTERNATE_TEAM_MESSAGE, code="configuration")
            next_team = others[0]

            last = DraftHistoryEntry.objects.filter(scope).aggregate(
                last=Max("pick_order")
            )["last"]
            pick_order = (last or 0) + 1
            DraftHistoryEntry.objects.create(
                team_id=team_id,
                player_id=player_uuid,
                pick_order=pick_order,
                match=match,
            )

            state.current_team_id = next_team  # type: ignore[attr-defined]
            state.save(update_fields=["current_team", "updated_at"])

        logger.info(
            "Pick #%s in match %s: %s took player %s, %s is next",
            pick_order,
            getattr(match, "id_uuid", None),
            team_id,
            player_uuid,
            next_team,
        )
        return DraftResult(success=True, next_team=next_team)

    return _run("pick", _pick)


def end_draft(match_id: UUID | str | None = None) -> DraftResult:
    """Deactivate the draft. ``current_team`` is left as it was.

    Ending a draft that is not active (or was never started) succeeds and does
    not create a state row.

    Returns:
        DraftResult: Always successful unless the database fails.

    """

    def _end() -> DraftResult:
        parsed = _parse_uuid(match_id, "matchId")
        scope = Q(match__isnull=True) if parsed is None else Q(match_id=parsed)
        with transaction.atomic():
            updated = DraftState.objects.filter(scope, key=DRAFT_STATE_KEY).update(
                is_active=False
            )
        logger.info("Draft ended for match %s (rows=%s)", parsed, updated)
        return DraftResult(success=True)

    return _run("end", _end)


def _default_state(match_id: UUID | str | None) -> dict[str, Any]:
    return {
        "id": DRAFT_STATE_KEY,
        "match_id": str(match_id) if match_id else None,
        "current_team": None,
        "is_active": False,
    }


def _read(operation: str, fn: Callable[[], T], default: T) -> T:
    try:
        return fn()
    except DraftError as exc:
        logger.warning("Draft %s rejected (%s): %s", operation, exc.code, exc)
    except DatabaseError:
        logger.exception("Draft %s failed", operation)
    return default


def get_draft_state(match_id: UUID | str | None = None) -> dict[str, Any]:
    """Return the draft state of the match.

    Falls back to an inactive state without a current team when there is no
    row, the match id is malformed, or the database fails.

    Returns:
        dict[str, Any]: ``{"id", "match_id", "current_team", "is_active"}``

    """

    def _state() -> dict[str, Any]:
        parsed = _parse_uuid(match_id, "matchId")
        scope = Q(match__isnull=True) if parsed is None else Q(match_id=parsed)
        state = DraftState.objects.filter(scope, key=DRAFT_STATE_KEY).first()
        if state is None:
            return _default_state(parsed)
        return {
            "id": state.key,
            "match_id": str(parsed) if parsed else None,
            "current_team": state.current_team_id,  # type: ignore[attr-defined]
            "is_active": state.is_active,
        }

    return _read("state", _state, _default_state(match_id))


def _history_entry(
    entry: DraftHistoryEntry,
    teams: dict[str, Team],
    players: dict[UUID, Player],
) -> dict[str, Any]:
    team = teams.get(entry.team_id)  # type: ignore[attr-defined]
    player = players.get(entry.player_id)  # type: ignore[attr-defined]
    created_at: datetime = entry.created_at
    return {
        "id": str(entry.id_uuid),
        "team_id": entry.team_id,  # type: ignore[attr-defined]
        "player_id": str(entry.player_id),  # type: ignore[attr-defined]
        "pick_order": entry.pick_order,
        "match_id": str(entry.match_id) if entry.match_id else None,  # type: ignore[attr-defined]
        "created_at": created_at.isoformat(),
        "team_name": team.name if team else None,
        "player_name": player.name if player else None,
    }


def get_draft_history(match_id: UUID | str | None = None) -> list[dict[str, Any]]:
    """Return the picks of the match ordered by pick order.

    Team and player names are resolved with one query each for the teams and
    players referenced by the picks.

    Returns:
        list[dict[str, Any]]: Enriched picks; empty on absence or failure.

    """

    def _history() -> list[dict[str, Any]]:
        parsed = _parse_uuid(match_id, "matchId")
        scope = Q(match__isnull=True) if parsed is None else Q(match_id=parsed)
        entries = list(DraftHistoryEntry.objects.filter(scope).order_by("pick_order"))
        if not entries:
            return []

        team_ids = {entry.team_id for entry in entries}  # type: ignore[attr-defined]
        player_ids = {entry.player_id for entry in entries}  # type: ignore[attr-defined]
        teams = Team.objects.in_bulk(team_ids)
        players = Player.objects.in_bulk(player_ids)
        return [_history_entry(entry, teams, players) for entry in entries]

    return _read("history", _history, [])

"""Tests for the available-player pool."""

from __future__ import annotations

from types import SimpleNamespace
from uuid import UUID

import pytest

from apps.draft.models import DraftHistoryEntry
from apps.player.models import Player
from apps.schedule.models import Match, MatchAvailablePlayer
from apps.schedule.services.availability import (
    available_players,
    get_available_players,
)
from apps.team.models import Team


def _player(name: str, pid: int) -> Player:
    return Player(id_uuid=UUID(int=pid), name=name)


def _row(pid: int, *, available: bool = True) -> SimpleNamespace:
    return SimpleNamespace(player_id=UUID(int=pid), is_available=available)


def _pick(pid: int) -> SimpleNamespace:
    return SimpleNamespace(player_id=UUID(int=pid))


ROSTER = [_player("Ana", 1), _player("Bea", 2), _player("Carla", 3)]


def test_without_availability_rows_everyone_is_available() -> None:
    """A match created without a pool falls back to the whole roster."""
    assert available_players(ROSTER, [], []) == ROSTER


def test_only_players_marked_available_are_in_the_pool() -> None:
    """Rows marked unavailable and players without a row are excluded."""
    rows = [_row(1), _row(2, available=False)]

    assert [p.name for p in available_players(ROSTER, rows, [])] == ["Ana"]


def test_all_rows_unavailable_means_empty_pool() -> None:
    """Having rows switches off the fallback even when none are available."""
    rows = [_row(1, available=False)]

    assert available_players(ROSTER, rows, []) == []


def test_picked_players_are_removed_and_order_is_kept() -> None:
    """Drafted players drop out; the roster order is preserved."""
    rows = [_row(3), _row(2), _row(1)]

    pool = available_players(ROSTER, rows, [_pick(2)])

    assert [p.name for p in pool] == ["Ana", "Carla"]


def test_picks_also_filter_the_fallback_pool() -> None:
    """Without rows, drafted players are still excluded."""
    pool = available_players(ROSTER, [], [_pick(1)])

    assert [p.name for p in pool] == ["Bea", "Carla"]


@pytest.mark.django_db
def test_get_available_players_reads_match_scope() -> None:
    """Rows and picks of other matches do not leak into the pool."""
    team = Team.objects.create(id="borjas", name="Equipo A")
    ana = Player.objects.create(name="Ana")
    bea = Player.objects.create(name="Bea")
    carla = Player.objects.create(name="Carla")
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    other = Match.objects.create(name="Viernes", date="2025-05-02")

    MatchAvailablePlayer.objects.create(match=match, player=ana)
    MatchAvailablePlayer.objects.create(match=match, player=bea)
    MatchAvailablePlayer.objects.create(match=other, player=carla)
    DraftHistoryEntry.objects.create(team=team, player=ana, pick_order=1, match=other)
    DraftHistoryEntry.objects.create(team=team, player=bea, pick_order=1, match=match)

    assert get_available_players(match) == [ana]
    assert get_available_players(other) == [carla]


@pytest.mark.django_db
def test_get_available_players_without_match_uses_matchless_picks() -> None:
    """The match-less draft has no pool, only picks are excluded."""
    team = Team.objects.create(id="borjas", name="Equipo A")
    ana = Player.objects.create(name="Ana")
    bea = Player.objects.create(name="Bea")
    DraftHistoryEntry.objects.create(team=team, player=ana, pick_order=1)

    assert get_available_players(None) == [bea]

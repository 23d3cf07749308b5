"""Tests for lineup placement."""

from __future__ import annotations

from uuid import uuid4

import pytest

from apps.lineup.models import TeamPlayerPosition
from apps.lineup.services.lineup import (
    LineupError,
    LineupSlots,
    load_lineups,
    remove_player,
    reset_lineups,
    save_position,
    team_rating,
)
from apps.player.models import Player
from apps.schedule.models import Match
from apps.team.models import Team


def _card(rating: int) -> dict:
    return {"id": str(uuid4()), "name": "x", "rating": rating}


@pytest.fixture
def setup(db: None) -> tuple[Match, list[Player]]:
    """Create both teams, a match and three players."""
    Team.objects.create(id="borjas", name="Equipo A")
    Team.objects.create(id="nietos", name="Equipo B")
    players = [
        Player.objects.create(name="Ana", rating=82, goals=3),
        Player.objects.create(name="Bea", rating=85),
        Player.objects.create(name="Carla", rating=80),
    ]
    return Match.objects.create(name="Jueves", date="2025-05-01"), players


def test_slots_require_every_position() -> None:
    """Slots reject missing and unknown position keys."""
    full = {p: [] for p in ("GK", "CL", "CR", "ML", "MR", "ST", "SUB")}
    assert LineupSlots.from_mapping(full) == LineupSlots()

    with pytest.raises(ValueError, match="missing"):
        LineupSlots.from_mapping({"GK": []})
    with pytest.raises(ValueError, match="XX"):
        LineupSlots.from_mapping({**full, "XX": []})


def test_team_rating_averages_outfield_players() -> None:
    """Bench players do not count; the average is rounded half up."""
    slots = LineupSlots(
        GK=(_card(80),),  # type: ignore[arg-type]
        ST=(_card(81),),  # type: ignore[arg-type]
        CL=(_card(81),),  # type: ignore[arg-type]
        SUB=(_card(10),),  # type: ignore[arg-type]
    )
    assert team_rating(slots) == 80.7  # noqa: PLR2004
    pair = LineupSlots(GK=(_card(80),), ML=(_card(81),))  # type: ignore[arg-type]
    assert team_rating(pair) == 80.5  # noqa: PLR2004
    assert team_rating(LineupSlots(SUB=(_card(90),))) is None  # type: ignore[arg-type]


@pytest.mark.django_db
def test_save_position_upserts(setup: tuple[Match, list[Player]]) -> None:
    """Saving the same player twice moves them instead of duplicating."""
    match, (ana, _bea, _carla) = setup

    save_position("borjas", ana.id_uuid, "GK", match_id=match.id_uuid)
    save_position("borjas", ana.id_uuid, "ST", order=2, match_id=match.id_uuid)

    placement = TeamPlayerPosition.objects.get(match=match)
    assert (placement.position, placement.position_order) == ("ST", 2)


@pytest.mark.django_db
def test_save_position_validates(setup: tuple[Match, list[Player]]) -> None:
    """Unknown positions, teams, players and matches are rejected."""
    match, (ana, _bea, _carla) = setup

    with pytest.raises(LineupError) as excinfo:
        save_position("borjas", ana.id_uuid, "XX", match_id=match.id_uuid)
    assert excinfo.value.code == "bad_request"

    with pytest.raises(LineupError) as excinfo:
        save_position("ghosts", ana.id_uuid, "GK", match_id=match.id_uuid)
    assert excinfo.value.code == "not_found"

    with pytest.raises(LineupError) as excinfo:
        save_position("borjas", uuid4(), "GK", match_id=match.id_uuid)
    assert excinfo.value.code == "not_found"

    with pytest.raises(LineupError) as excinfo:
        save_position("borjas", ana.id_uuid, "GK", match_id=uuid4())
    assert excinfo.value.code == "not_found"

    assert not TeamPlayerPosition.objects.exists()


@pytest.mark.django_db
def test_load_lineups_groups_by_slot(setup: tuple[Match, list[Player]]) -> None:
    """Players are grouped per team and slot in position order."""
    match, (ana, bea, carla) = setup
    save_position("borjas", bea.id_uuid, "SUB", order=2, match_id=match.id_uuid)
    save_position("borjas", carla.id_uuid, "SUB", order=1, match_id=match.id_uuid)
    save_position("borjas", ana.id_uuid, "GK", match_id=match.id_uuid)

    teams = load_lineups(match.id_uuid)

    assert set(teams) == {"borjas", "nietos"}
    borjas = teams["borjas"]["players"]
    assert [p["name"] for p in borjas.SUB] == ["Carla", "Bea"]
    assert borjas.GK[0]["stats"]["goals"] == 3  # noqa: PLR2004
    assert borjas.GK[0]["team"] == "borjas"
    assert teams["nietos"]["players"] == LineupSlots()


@pytest.mark.django_db
def test_scopes_are_independent(setup: tuple[Match, list[Player]]) -> None:
    """Match placements and match-less placements do not mix."""
    match, (ana, _bea, _carla) = setup
    save_position("borjas", ana.id_uuid, "GK", match_id=match.id_uuid)
    save_position("nietos", ana.id_uuid, "ST")

    assert load_lineups(match.id_uuid)["nietos"]["players"].ST == ()
    assert load_lineups()["borjas"]["players"].GK == ()

    assert reset_lineups() == 1
    assert TeamPlayerPosition.objects.filter(match=match).count() == 1


@pytest.mark.django_db
def test_remove_player(setup: tuple[Match, list[Player]]) -> None:
    """Removing deletes only that team's placement of the player."""
    match, (ana, bea, _carla) = setup
    save_position("borjas", ana.id_uuid, "GK", match_id=match.id_uuid)
    save_position("borjas", bea.id_uuid, "ST", match_id=match.id_uuid)

    assert remove_player("nietos", ana.id_uuid, match.id_uuid) == 0
    assert remove_player("borjas", ana.id_uuid, match.id_uuid) == 1
    assert list(
        TeamPlayerPosition.objects.values_list("player__name", flat=True)
    ) == ["Bea"]

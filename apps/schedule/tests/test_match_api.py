"""Tests for the match API endpoints."""

from __future__ import annotations

from datetime import timedelta
from http import HTTPStatus
import json
from typing import Any
from uuid import uuid4

from django.test import Client
from django.utils import timezone
import pytest

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


@pytest.fixture
def teams(db: None) -> tuple[Team, Team]:
    """Create the two draft teams."""
    return (
        Team.objects.create(id="borjas", name="Equipo A"),
        Team.objects.create(id="nietos", name="Equipo B"),
    )


@pytest.fixture
def players(db: None) -> list[Player]:
    """Create a small roster."""
    return [
        Player.objects.create(name=name) for name in ("Ana", "Bea", "Carla", "Dani")
    ]


def _post(client: Client, url: str, data: dict) -> Any:  # noqa: ANN401
    return client.post(url, data=json.dumps(data), content_type="application/json")


def _put(client: Client, url: str, data: dict) -> Any:  # noqa: ANN401
    return client.put(url, data=json.dumps(data), content_type="application/json")


@pytest.mark.django_db
def test_create_match_with_available_players(
    client: Client,
    players: list[Player],
) -> None:
    """Creating a match stores it as PENDING with one row per player."""
    response = _post(
        client,
        "/api/matches",
        {
            "name": "Jueves",
            "date": "2025-05-01",
            "location": "Polideportivo",
            "availablePlayers": [str(p.id_uuid) for p in players[:3]],
        },
    )

    assert response.status_code == HTTPStatus.CREATED
    payload = response.json()
    assert payload["status"] == MatchStatus.PENDING
    match = Match.objects.get(id_uuid=payload["id"])
    assert match.location == "Polideportivo"
    assert MatchAvailablePlayer.objects.filter(match=match).count() == 3  # noqa: PLR2004


@pytest.mark.django_db
@pytest.mark.parametrize(
    "body",
    [
        {"date": "2025-05-01", "availablePlayers": ["x"]},
        {"name": "Jueves", "availablePlayers": []},
        {"name": "Jueves", "date": "2025-05-01", "availablePlayers": []},
        {"name": "Jueves", "date": "2025-05-01"},
    ],
)
def test_create_match_validates_payload(client: Client, body: dict) -> None:
    """Name, date and a non-empty player list are required."""
    response = _post(client, "/api/matches/", body)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert Match.objects.count() == 0


@pytest.mark.django_db
def test_create_match_rejects_unknown_player(client: Client) -> None:
    """Nothing is stored when a player id does not exist."""
    response = _post(
        client,
        "/api/matches/",
        {"name": "Jueves", "date": "2025-05-01", "availablePlayers": [str(uuid4())]},
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["success"] is False
    assert Match.objects.count() == 0


@pytest.mark.django_db
def test_list_matches_newest_first(client: Client) -> None:
    """Most recently created matches come first."""
    first = Match.objects.create(name="First", date="2025-05-01")
    Match.objects.create(name="Second", date="2025-05-08")
    Match.objects.filter(pk=first.pk).update(
        created_at=timezone.now() - timedelta(days=1)
    )

    response = client.get("/api/matches/")

    assert response.status_code == HTTPStatus.OK
    assert [m["name"] for m in response.json()] == ["Second", "First"]


@pytest.mark.django_db
def test_retrieve_match_includes_stats(
    client: Client,
    teams: tuple[Team, Team],
    players: list[Player],
) -> None:
    """The detail view returns the match and its stats."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    PlayerMatchStats.objects.create(
        match=match, player=players[0], team=teams[0], goals=2
    )

    response = client.get(f"/api/matches/{match.id_uuid}/")

    assert response.status_code == HTTPStatus.OK
    payload = response.json()
    assert payload["match"]["name"] == "Jueves"
    assert payload["stats"][0]["goals"] == 2  # noqa: PLR2004
    assert payload["stats"][0]["team_id"] == "borjas"


@pytest.mark.django_db
def test_update_match_trims_name(client: Client) -> None:
    """PUT renames and reschedules the match."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")

    response = _put(
        client,
        f"/api/matches/{match.id_uuid}/",
        {"name": "  Viernes  ", "date": "2025-05-02"},
    )

    assert response.status_code == HTTPStatus.OK
    match.refresh_from_db()
    assert match.name == "Viernes"
    assert match.date == "2025-05-02"


@pytest.mark.django_db
def test_update_match_requires_name_and_date(client: Client) -> None:
    """Both fields are mandatory."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")

    response = _put(client, f"/api/matches/{match.id_uuid}/", {"name": "Viernes"})

    assert response.status_code == HTTPStatus.BAD_REQUEST


@pytest.mark.django_db
def test_set_status(client: Client) -> None:
    """A match can be marked finished, unknown statuses are rejected."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")

    response = _put(
        client, f"/api/matches/{match.id_uuid}/status/", {"status": "FINISHED"}
    )
    assert response.status_code == HTTPStatus.OK
    match.refresh_from_db()
    assert match.status == MatchStatus.FINISHED

    response = _put(
        client, f"/api/matches/{match.id_uuid}/status", {"status": "PLAYING"}
    )
    assert response.status_code == HTTPStatus.BAD_REQUEST


@pytest.mark.django_db
def test_available_players_excludes_drafted_and_disables_caching(
    client: Client,
    teams: tuple[Team, Team],
    players: list[Player],
) -> None:
    """The pool is the available set minus drafted players, never cached."""
    ana, bea, carla, _dani = players
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    for player in (ana, bea, carla):
        MatchAvailablePlayer.objects.create(match=match, player=player)
    DraftHistoryEntry.objects.create(
        team=teams[0], player=bea, pick_order=1, match=match
    )

    response = client.get(f"/api/matches/{match.id_uuid}/available-players/")

    assert response.status_code == HTTPStatus.OK
    assert [p["name"] for p in response.json()] == ["Ana", "Carla"]
    assert "no-cache" in response["Cache-Control"]
    assert "no-store" in response["Cache-Control"]


@pytest.mark.django_db
def test_available_players_falls_back_to_roster(
    client: Client,
    players: list[Player],
) -> None:
    """A match without any availability rows offers the whole roster."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")

    response = client.get(f"/api/matches/{match.id_uuid}/available-players")

    assert [p["name"] for p in response.json()] == ["Ana", "Bea", "Carla", "Dani"]


@pytest.mark.django_db
def test_update_available_players(client: Client, players: list[Player]) -> None:
    """PUT marks exactly the given players available and adds missing rows."""
    ana, bea, carla, _dani = players
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    MatchAvailablePlayer.objects.create(match=match, player=ana)
    MatchAvailablePlayer.objects.create(match=match, player=bea)

    response = _put(
        client,
        f"/api/matches/{match.id_uuid}/available-players/",
        {"playerIds": [str(bea.id_uuid), str(carla.id_uuid)]},
    )

    assert response.status_code == HTTPStatus.OK
    rows = dict(
        MatchAvailablePlayer.objects.filter(match=match).values_list(
            "player__name", "is_available"
        )
    )
    assert rows == {"Ana": False, "Bea": True, "Carla": True}


@pytest.mark.django_db
def test_reset_all_clears_draft_progress(
    client: Client,
    teams: tuple[Team, Team],
    players: list[Player],
) -> None:
    """Reset clears lineups and picks and stops the draft, keeping the pool."""
    borjas, _nietos = teams
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    MatchAvailablePlayer.objects.create(match=match, player=players[0])
    DraftState.objects.create(match=match, current_team=borjas, is_active=True)
    DraftHistoryEntry.objects.create(
        team=borjas, player=players[0], pick_order=1, match=match
    )
    TeamPlayerPosition.objects.create(
        team=borjas, player=players[0], match=match, position="GK"
    )

    response = client.post(f"/api/matches/{match.id_uuid}/reset-all/")

    assert response.status_code == HTTPStatus.OK
    state = DraftState.objects.get(match=match)
    assert state.is_active is False
    assert state.current_team is None
    assert not DraftHistoryEntry.objects.filter(match=match).exists()
    assert not TeamPlayerPosition.objects.filter(match=match).exists()
    assert MatchAvailablePlayer.objects.filter(match=match).exists()


@pytest.mark.django_db
def test_delete_match_removes_dependent_rows(
    client: Client,
    teams: tuple[Team, Team],
    players: list[Player],
) -> None:
    """Deleting a match removes its draft, lineups, pool and stats."""
    borjas, _nietos = teams
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    keep = Match.objects.create(name="Viernes", date="2025-05-02")
    for target in (match, keep):
        MatchAvailablePlayer.objects.create(match=target, player=players[0])
        DraftState.objects.create(match=target, current_team=borjas, is_active=True)
        DraftHistoryEntry.objects.create(
            team=borjas, player=players[0], pick_order=1, match=target
        )
        TeamPlayerPosition.objects.create(
            team=borjas, player=players[0], match=target, position="ST"
        )
        PlayerMatchStats.objects.create(match=target, player=players[0], team=borjas)

    response = client.delete(f"/api/matches/{match.id_uuid}/")

    assert response.status_code == HTTPStatus.OK
    assert response.json()["deletedMatch"]["name"] == "Jueves"
    assert not Match.objects.filter(id_uuid=match.id_uuid).exists()
    for model in (
        MatchAvailablePlayer,
        DraftState,
        DraftHistoryEntry,
        TeamPlayerPosition,
        PlayerMatchStats,
    ):
        assert model.objects.count() == 1, model.__name__


@pytest.mark.django_db
def test_save_stats_upserts(
    client: Client,
    teams: tuple[Team, Team],
    players: list[Player],
) -> None:
    """Posting stats twice for the same player updates the existing row."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    url = f"/api/matches/{match.id_uuid}/stats/"
    body = {"player_id": str(players[0].id_uuid), "team_id": "borjas", "goals": 1}

    assert _post(client, url, body).status_code == HTTPStatus.OK
    body.update(goals=3, saves=2)
    assert _post(client, url, body).status_code == HTTPStatus.OK

    row = PlayerMatchStats.objects.get(match=match, player=players[0])
    assert (row.goals, row.assists, row.saves) == (3, 0, 2)

    response = client.get(url)
    assert response.json()["stats"][0]["goals"] == 3  # noqa: PLR2004


@pytest.mark.django_db
def test_save_stats_requires_player_and_team(
    client: Client,
    teams: tuple[Team, Team],
) -> None:
    """player_id and team_id are required; unknown ids are 404."""
    match = Match.objects.create(name="Jueves", date="2025-05-01")
    url = f"/api/matches/{match.id_uuid}/stats/"

    assert _post(client, url, {"team_id": "borjas"}).status_code == (
        HTTPStatus.BAD_REQUEST
    )
    response = _post(client, url, {"player_id": str(uuid4()), "team_id": "borjas"})
    assert response.status_code == HTTPStatus.NOT_FOUND


@pytest.mark.django_db
def test_unknown_match_is_404(client: Client) -> None:
    """Detail routes 404 for unknown or malformed ids."""
    assert client.get(f"/api/matches/{uuid4()}/").status_code == HTTPStatus.NOT_FOUND
    assert client.get("/api/matches/not-a-uuid/").status_code == HTTPStatus.NOT_FOUND

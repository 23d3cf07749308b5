"""Tests for the team API endpoints."""

from __future__ import annotations

from http import HTTPStatus

from django.core.management import call_command
from django.test import Client
import pytest
from pytest_django.fixtures import SettingsWrapper

from apps.team.models import Team


@pytest.mark.django_db
def test_team_initialize_creates_configured_teams(
    client: Client,
    settings: SettingsWrapper,
) -> None:
    """Both default teams are created on an empty database."""
    settings.TRIATAPP_DEFAULT_TEAMS = (
        {"id": "borjas", "name": "Equipo A"},
        {"id": "nietos", "name": "Equipo B"},
    )

    response = client.post("/api/teams/initialize/")

    assert response.status_code == HTTPStatus.OK
    assert sorted(response.json()["created"]) == ["borjas", "nietos"]
    assert dict(Team.objects.values_list("id", "name")) == {
        "borjas": "Equipo A",
        "nietos": "Equipo B",
    }


@pytest.mark.django_db
def test_team_initialize_is_idempotent(client: Client) -> None:
    """Existing teams are kept as they are and nothing is duplicated."""
    Team.objects.create(id="borjas", name="Casper")

    response = client.post("/api/teams/initialize")
    assert response.status_code == HTTPStatus.OK
    assert response.json()["created"] == ["nietos"]

    response = client.post("/api/teams/initialize")
    assert response.json()["created"] == []
    assert Team.objects.count() == 2  # noqa: PLR2004
    assert Team.objects.get(id="borjas").name == "Casper"


@pytest.mark.django_db
def test_team_list(client: Client) -> None:
    """Teams are listed by id."""
    call_command("init_teams")

    response = client.get("/api/teams/")

    assert response.status_code == HTTPStatus.OK
    assert [team["id"] for team in response.json()] == ["borjas", "nietos"]

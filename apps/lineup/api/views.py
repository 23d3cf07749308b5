"""Lineup API views."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response

from apps.lineup.services.lineup import (
    LineupError,
    load_lineups,
    remove_player,
    reset_lineups,
    save_position,
    team_rating,
)

from .serializers import (
    LineupPlayerSerializer,
    LineupSaveSerializer,
    LineupScopeSerializer,
)


ERROR_STATUS = {
    "bad_request": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
}


def _error_response(exc: LineupError) -> Response:
    return Response(
        {"success": False, "error": str(exc)},
        status=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
    )


def _invalid(errors: Mapping[str, Any]) -> Response:
    return Response(
        {"success": False, "error": "Missing required data", "details": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def lineups(request: Request) -> Response:
    """Return every team's lineup for ``?matchId=``."""
    try:
        teams = load_lineups(request.query_params.get("matchId") or None)
    except LineupError as exc:
        return _error_response(exc)

    return Response(
        {
            team_id: {
                "id": team["id"],
                "name": team["name"],
                "players": team["players"].as_dict(),
                "rating": team_rating(team["players"]),
            }
            for team_id, team in teams.items()
        }
    )


@api_view(["POST"])
@permission_classes([AllowAny])
def save(request: Request) -> Response:
    """Place a player in a slot.

    Body: ``{"teamId", "playerId", "position", "order"?, "matchId"?}``

    """
    payload = LineupSaveSerializer(data=request.data)
    if not payload.is_valid():
        return _invalid(payload.errors)

    data = payload.validated_data
    try:
        save_position(
            data["teamId"],
            data["playerId"],
            data["position"],
            order=data["order"],
            match_id=data.get("matchId"),
        )
    except LineupError as exc:
        return _error_response(exc)
    return Response({"success": True})


@api_view(["POST"])
@permission_classes([AllowAny])
def remove(request: Request) -> Response:
    """Take a player off a team.

    Body: ``{"teamId", "playerId", "matchId"?}``

    """
    payload = LineupPlayerSerializer(data=request.data)
    if not payload.is_valid():
        return _invalid(payload.errors)

    data = payload.validated_data
    try:
        remove_player(data["teamId"], data["playerId"], match_id=data.get("matchId"))
    except LineupError as exc:
        return _error_response(exc)
    return Response({"success": True})


@api_view(["POST"])
@permission_classes([AllowAny])
def reset(request: Request) -> Response:
    """Clear every placement of a match.

    Body: ``{"matchId"?}``; without it the match-less placements are cleared.

    """
    payload = LineupScopeSerializer(data=request.data)
    if not payload.is_valid():
        return _invalid(payload.errors)

    try:
        reset_lineups(payload.validated_data.get("matchId"))
    except LineupError as exc:
        return _error_response(exc)
    return Response({"success": True})

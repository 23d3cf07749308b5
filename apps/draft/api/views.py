"""Draft API views.

Mutating endpoints answer ``{"success": true, ...}`` or
``{"success": false, "error": "..."}`` with a status derived from the failure
code. State and history never fail.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response

from apps.draft.services.draft_coordinator import (
    DraftResult,
    end_draft,
    get_draft_history,
    get_draft_state,
    pick_player,
    start_draft,
)

from .serializers import DraftMatchSerializer, DraftPickSerializer


FAILURE_STATUS = {
    "bad_request": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "not_active": status.HTTP_409_CONFLICT,
    "not_your_turn": status.HTTP_409_CONFLICT,
    "player_unavailable": status.HTTP_409_CONFLICT,
    "conflict": status.HTTP_409_CONFLICT,
    "configuration": status.HTTP_409_CONFLICT,
    "persistence": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _failure(result: DraftResult) -> Response:
    return Response(
        {"success": False, "error": result.error, "code": result.code},
        status=FAILURE_STATUS.get(result.code or "", status.HTTP_400_BAD_REQUEST),
    )


def _invalid(errors: Mapping[str, Any], message: str) -> Response:
    return Response(
        {"success": False, "error": message, "details": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


@api_view(["POST"])
@permission_classes([AllowAny])
def start(request: Request) -> Response:
    """Start (or restart) the draft of a match.

    Body: ``{"matchId"?: uuid}``

    """
    payload = DraftMatchSerializer(data=request.data)
    if not payload.is_valid():
        return _invalid(payload.errors, "Invalid matchId")

    result = start_draft(payload.validated_data.get("matchId"))
    if not result.success:
        return _failure(result)
    return Response({"success": True, "startingTeam": result.starting_team})


@api_view(["POST"])
@permission_classes([AllowAny])
def pick(request: Request) -> Response:
    """Pick a player for the team whose turn it is.

    Body: ``{"teamId": str, "playerId": uuid, "matchId"?: uuid}``

    """
    payload = DraftPickSerializer(data=request.data)
    if not payload.is_valid():
        return _invalid(payload.errors, "teamId and playerId are required")

    data = payload.validated_data
    result = pick_player(data["teamId"], data["playerId"], data.get("matchId"))
    if not result.success:
        return _failure(result)
    return Response({"success": True, "nextTeam": result.next_team})


@api_view(["POST"])
@permission_classes([AllowAny])
def end(request: Request) -> Response:
    """End the draft of a match.

    Body: ``{"matchId"?: uuid}``

    """
    payload = DraftMatchSerializer(data=request.data)
    if not payload.is_valid():
        return _invalid(payload.errors, "Invalid matchId")

    result = end_draft(payload.validated_data.get("matchId"))
    if not result.success:
        return _failure(result)
    return Response({"success": True})


@api_view(["GET"])
@permission_classes([AllowAny])
def state(request: Request) -> Response:
    """Return the draft state for ``?matchId=``."""
    return Response(get_draft_state(request.query_params.get("matchId")))


@api_view(["GET"])
@permission_classes([AllowAny])
def history(request: Request) -> Response:
    """Return the ordered picks for ``?matchId=``."""
    return Response(get_draft_history(request.query_params.get("matchId")))

"""Views for schedule endpoints."""

from __future__ import annotations

import logging
from typing import Any

from django.utils.cache import add_never_cache_headers
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from apps.common.api.pagination import StandardResultsSetPagination
from apps.player.api.serializers import PlayerSerializer
from apps.schedule.models import Match, PlayerMatchStats
from apps.schedule.services.availability import get_available_players
from apps.schedule.services.match_admin import (
    MatchAdminError,
    StatsInput,
    create_match,
    delete_match,
    reset_match,
    save_player_stats,
    set_available_players,
)

from .serializers import (
    AvailablePlayersSerializer,
    MatchCreateSerializer,
    MatchSerializer,
    MatchStatusSerializer,
    MatchUpdateSerializer,
    PlayerMatchStatsSerializer,
    PlayerMatchStatsWriteSerializer,
)


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    "bad_request": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
}


def _error_response(exc: MatchAdminError) -> Response:
    return Response(
        {"success": False, "error": str(exc)},
        status=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
    )


def _match_stats(match: Match) -> list[dict[str, Any]]:
    queryset = PlayerMatchStats.objects.filter(match=match).order_by("created_at")
    return PlayerMatchStatsSerializer(queryset, many=True).data  # type: ignore[return-value]


class MatchViewSet(viewsets.ModelViewSet):
    """Matches, their availability pool, stats and reset."""

    queryset = Match.objects.order_by("-created_at")
    serializer_class = MatchSerializer
    pagination_class = StandardResultsSetPagination
    lookup_field = "id_uuid"
    lookup_url_kwarg = "match_id"
    http_method_names = ("get", "post", "put", "delete", "head", "options")

    def create(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Create a match and its availability pool.

        Returns:
            Response: The created match.

        """
        payload = MatchCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        try:
            match = create_match(
                name=data["name"].strip(),
                date=data["date"],
                location=data.get("location"),
                player_ids=data["availablePlayers"],
            )
        except MatchAdminError as exc:
            return _error_response(exc)
        return Response(MatchSerializer(match).data, status=status.HTTP_201_CREATED)

    def retrieve(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Return the match together with its per-player stats.

        Returns:
            Response: ``{"match": ..., "stats": [...]}``

        """
        match = self.get_object()
        return Response(
            {"match": MatchSerializer(match).data, "stats": _match_stats(match)}
        )

    def update(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Rename and/or reschedule a match.

        Returns:
            Response: The updated match.

        """
        match = self.get_object()
        payload = MatchUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        name = payload.validated_data["name"].strip()
        if not name:
            return Response(
                {"success": False, "error": "Name and date are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        match.name = name
        match.date = payload.validated_data["date"]
        match.save(update_fields=["name", "date", "updated_at"])
        return Response(
            {
                "success": True,
                "message": "Match updated successfully",
                "match": MatchSerializer(match).data,
            }
        )

    def destroy(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Delete a match with its draft, lineups, availability and stats.

        Returns:
            Response: The deleted match.

        """
        match = self.get_object()
        deleted = MatchSerializer(match).data
        delete_match(match)
        return Response(
            {
                "success": True,
                "message": "Match deleted successfully",
                "deletedMatch": deleted,
            }
        )

    @action(detail=True, methods=("PUT",), url_path="status")
    def set_status(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Mark a match as PENDING or FINISHED.

        Returns:
            Response: Success flag.

        """
        match = self.get_object()
        payload = MatchStatusSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        match.status = payload.validated_data["status"]
        match.save(update_fields=["status", "updated_at"])
        logger.info("Match %s status set to %s", match.id_uuid, match.status)
        return Response({"success": True})

    @action(detail=True, methods=("GET", "PUT"), url_path="available-players")
    def available_players(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Read (GET) or replace (PUT) the players that can still be drafted.

        Returns:
            Response: The available players (GET) or a success flag (PUT).

        """
        match = self.get_object()

        if request.method == "PUT":
            payload = AvailablePlayersSerializer(data=request.data)
            payload.is_valid(raise_exception=True)
            try:
                set_available_players(match, payload.validated_data["playerIds"])
            except MatchAdminError as exc:
                return _error_response(exc)
            return Response({"success": True})

        players = get_available_players(match)
        response = Response(PlayerSerializer(players, many=True).data)
        # Polled during the draft; must never be served from a cache.
        add_never_cache_headers(response)
        response["Pragma"] = "no-cache"
        return response

    @action(detail=True, methods=("POST",), url_path="reset-all")
    def reset_all(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Clear lineups and draft history and stop the draft.

        Returns:
            Response: Success flag.

        """
        match = self.get_object()
        reset_match(match)
        return Response({"success": True, "message": "Match reset successfully"})

    @action(detail=True, methods=("GET", "POST"), url_path="stats")
    def stats(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Read (GET) or upsert (POST) per-player stats for the match.

        Returns:
            Response: The stats list (GET) or a success flag (POST).

        """
        match = self.get_object()

        if request.method == "POST":
            payload = PlayerMatchStatsWriteSerializer(data=request.data)
            payload.is_valid(raise_exception=True)
            try:
                row = save_player_stats(match, StatsInput(**payload.validated_data))
            except MatchAdminError as exc:
                return _error_response(exc)
            return Response(
                {
                    "success": True,
                    "message": "Player stats saved successfully",
                    "stats": PlayerMatchStatsSerializer(row).data,
                }
            )

        return Response({"success": True, "stats": _match_stats(match)})

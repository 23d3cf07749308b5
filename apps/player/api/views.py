"""Views powering the player API endpoints."""

from __future__ import annotations

from typing import Any

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from apps.common.api.pagination import StandardResultsSetPagination
from apps.player.models.player import Player
from apps.player.services.samples import initialize_sample_players

from .serializers import PlayerSerializer


class PlayerViewSet(viewsets.ModelViewSet):
    """Roster CRUD, ordered by name."""

    queryset = Player.objects.order_by("name")
    serializer_class = PlayerSerializer
    pagination_class = StandardResultsSetPagination
    lookup_field = "id_uuid"
    lookup_url_kwarg = "player_id"

    @action(detail=False, methods=("POST",), url_path="initialize")
    def initialize(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Replace the roster with the sample players.

        Returns:
            Response: Success flag and the number of players created.

        """
        players = initialize_sample_players()
        return Response(
            {
                "success": True,
                "message": "Sample players initialized successfully",
                "count": len(players),
            },
            status=status.HTTP_200_OK,
        )

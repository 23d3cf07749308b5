"""ViewSets for team-related API endpoints."""

from __future__ import annotations

from typing import Any

from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from apps.team.models.team import Team
from apps.team.services.initialize import initialize_teams

from .serializers import TeamSerializer


class TeamViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """List the draft teams.

    Teams are fixed configuration, so there is no create/update/delete here;
    use the ``initialize`` action (or ``manage.py init_teams``) instead.
    """

    queryset = Team.objects.order_by("id")
    serializer_class = TeamSerializer

    @action(detail=False, methods=("POST",), url_path="initialize")
    def initialize(
        self,
        request: Request,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Response:
        """Create the configured teams that are missing.

        Returns:
            Response: Success flag and the ids of the teams created.

        """
        created = initialize_teams()
        message = (
            "Teams initialized successfully" if created else "Teams already initialized"
        )
        return Response(
            {
                "success": True,
                "message": message,
                "created": [team.id for team in created],
            }
        )

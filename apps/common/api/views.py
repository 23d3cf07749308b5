"""Admin-only debug endpoints."""

from __future__ import annotations

from rest_framework import permissions, serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.utils.slow_requests import clear_slow_requests, read_slow_requests


class SlowRequestsQuerySerializer(serializers.Serializer):
    """Query parameters of the slow-request listing."""

    limit = serializers.IntegerField(min_value=1, max_value=500, default=50)
    matchId = serializers.UUIDField(required=False)  # noqa: N815


class SlowRequestsAPIView(APIView):
    """Inspect or clear the slow-request buffer.

    ``GET ?limit=&matchId=`` lists the newest entries, optionally only those of
    one match. ``DELETE`` empties the buffer.
    """

    permission_classes = (permissions.IsAdminUser,)

    def get(self, request: Request) -> Response:
        """Return the newest buffered slow requests."""
        query = SlowRequestsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        match_id = query.validated_data.get("matchId")
        count, items = read_slow_requests(
            query.validated_data["limit"],
            str(match_id) if match_id else None,
        )
        return Response({"count": count, "items": items})

    def delete(self, request: Request) -> Response:
        """Empty the buffer."""
        clear_slow_requests()
        return Response({"success": True})

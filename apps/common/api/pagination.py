"""Shared DRF pagination helpers.

There is no global pagination default; list endpoints opt in per-viewset.
"""

from __future__ import annotations

from typing import Any

from django.db.models import QuerySet
from rest_framework.pagination import PageNumberPagination
from rest_framework.request import Request
from rest_framework.views import APIView


class StandardResultsSetPagination(PageNumberPagination):
    """Opt-in pagination for list endpoints.

    Notes:
        - The roster and match lists are small, so pagination only applies when
          the client sends `page`. Without it the full list is returned, which
          is what the draft screens expect.
        - `max_page_size` protects the API from large accidental responses.

    """

    page_size = 50
    page_size_query_param = "page_size"
    max_page_size = 200

    def paginate_queryset(
        self,
        queryset: QuerySet[Any],
        request: Request,
        view: APIView | None = None,
    ) -> list[Any] | None:
        """Paginate only when the client asks for a page."""
        if self.page_query_param not in request.query_params:
            return None
        return super().paginate_queryset(queryset, request, view)

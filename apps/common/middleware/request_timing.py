"""Slow request surfacing middleware.

Goals:
- Add lightweight timing headers (works well with browser DevTools).
- Optionally keep a small rolling buffer of slow requests (in cache) that can be
  viewed via an admin-only API endpoint.

Opt-in settings:
- TRIATAPP_LOG_SLOW_REQUESTS (bool)
- TRIATAPP_SLOW_REQUEST_MS (int)
- TRIATAPP_SLOW_REQUEST_BUFFER_SIZE (int)

"""

from __future__ import annotations

from collections.abc import Callable
import logging
import time

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from apps.common.utils.slow_requests import (
    build_entry,
    record_slow_request,
    request_match_id,
)


logger = logging.getLogger("apps.common.slow_requests")


def _append_server_timing(existing: str | None, value: str) -> str:
    if not existing:
        return value
    # Multiple Server-Timing entries are comma-separated.
    return f"{existing}, {value}"


class RequestTimingMiddleware:
    """Measure request duration and surface slow requests."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Create the middleware.

        Args:
            get_response: The next middleware/view callable.

        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Time the request and optionally record slow requests."""
        start = time.perf_counter()
        response = self.get_response(request)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        response["X-Triatapp-Request-Duration-Ms"] = str(elapsed_ms)
        response["Server-Timing"] = _append_server_timing(
            response.headers.get("Server-Timing"),
            f"app;dur={elapsed_ms}",
        )

        if not bool(getattr(settings, "TRIATAPP_LOG_SLOW_REQUESTS", False)):
            return response

        threshold_ms = int(getattr(settings, "TRIATAPP_SLOW_REQUEST_MS", 500))
        if elapsed_ms < threshold_ms:
            return response

        response["X-Triatapp-Slow-Request"] = "1"
        logger.warning(
            "Slow request %sms (>= %sms) %s %s status=%s match=%s",
            elapsed_ms,
            threshold_ms,
            request.method,
            request.path,
            getattr(response, "status_code", None),
            request_match_id(request),
        )

        buffer_size = max(
            0, int(getattr(settings, "TRIATAPP_SLOW_REQUEST_BUFFER_SIZE", 200))
        )
        if buffer_size == 0:
            return response

        record_slow_request(build_entry(request, response, elapsed_ms), buffer_size)
        return response

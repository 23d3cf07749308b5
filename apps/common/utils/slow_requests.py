"""Rolling buffer of slow API requests, kept in the Django cache.

Entries are newest first. Each entry carries the match the request was about
(``match_id``), taken from the ``matchId`` query parameter or the
``match_id`` URL kwarg, so slow draft traffic can be narrowed to one match.
"""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse
from django.utils import timezone


logger = logging.getLogger(__name__)

SLOW_REQUESTS_CACHE_KEY = "triatapp:slow_requests"
MIN_BUFFER_TTL_S = 60


class SlowRequestEntry(TypedDict):
    """One buffered slow request."""

    ts: str
    method: str | None
    path: str
    view: str | None
    match_id: str | None
    status: int | None
    duration_ms: int


def slow_request_buffer_ttl_s() -> int:
    """Cache TTL of the buffer, never below one minute."""
    ttl = int(getattr(settings, "TRIATAPP_SLOW_REQUEST_BUFFER_TTL_S", 86400))
    return max(MIN_BUFFER_TTL_S, ttl)


def request_match_id(request: HttpRequest) -> str | None:
    """Return the match a request targets, if it names one."""
    resolver_match = getattr(request, "resolver_match", None)
    kwargs: dict[str, Any] = getattr(resolver_match, "kwargs", None) or {}
    match_id = kwargs.get("match_id") or request.GET.get("matchId")
    return str(match_id) if match_id else None


def build_entry(
    request: HttpRequest,
    response: HttpResponse,
    duration_ms: int,
) -> SlowRequestEntry:
    """Describe a finished request for the buffer."""
    return {
        "ts": timezone.now().isoformat(),
        "method": request.method,
        "path": request.path,
        "view": getattr(getattr(request, "resolver_match", None), "view_name", None),
        "match_id": request_match_id(request),
        "status": getattr(response, "status_code", None),
        "duration_ms": duration_ms,
    }


def _load() -> list[dict[str, Any]]:
    items = cache.get(SLOW_REQUESTS_CACHE_KEY) or []
    return items if isinstance(items, list) else []


def record_slow_request(entry: SlowRequestEntry, buffer_size: int) -> None:
    """Push ``entry`` onto the buffer, keeping at most ``buffer_size`` items.

    Cache failures are logged and swallowed; a slow request must not fail
    because the buffer is unavailable.
    """
    try:
        items = _load()
        items.insert(0, dict(entry))
        del items[buffer_size:]
        cache.set(SLOW_REQUESTS_CACHE_KEY, items, timeout=slow_request_buffer_ttl_s())
    except Exception:
        logger.exception("Failed to persist slow request buffer")


def read_slow_requests(
    limit: int,
    match_id: str | None = None,
) -> tuple[int, list[dict[str, Any]]]:
    """Return the buffer size and its newest ``limit`` entries.

    With ``match_id`` only the entries for that match are counted and returned.
    """
    items = _load()
    if match_id:
        items = [item for item in items if item.get("match_id") == match_id]
    return len(items), items[:limit]


def clear_slow_requests() -> None:
    """Empty the buffer."""
    cache.set(SLOW_REQUESTS_CACHE_KEY, [], timeout=slow_request_buffer_ttl_s())

"""Tests for the slow-requests debug endpoint."""

from __future__ import annotations

from uuid import uuid4

from django.contrib.auth import get_user_model
from django.core.cache import cache
import pytest
from rest_framework import status
from rest_framework.test import APIClient

from apps.common.utils.slow_requests import SLOW_REQUESTS_CACHE_KEY


@pytest.fixture
def admin_client(db: None) -> APIClient:
    """Return an authenticated staff API client."""
    admin = get_user_model().objects.create_user(
        username="admin",
        email="admin@example.com",
        is_staff=True,
        is_superuser=True,
    )
    client = APIClient()
    client.force_authenticate(admin)
    return client


@pytest.mark.django_db
def test_slow_requests_endpoint_denies_anonymous() -> None:
    """The endpoint is admin-only even though the rest of the API is open."""
    resp = APIClient().get("/api/debug/slow-requests/")
    assert resp.status_code in {
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
    }


@pytest.mark.django_db
def test_slow_requests_endpoint_lists_and_clears(admin_client: APIClient) -> None:
    """Admins can read the newest entries and clear the buffer."""
    cache.set(
        SLOW_REQUESTS_CACHE_KEY,
        [{"path": "/api/draft/pick"}, {"path": "/api/draft/start"}],
    )

    resp = admin_client.get("/api/debug/slow-requests/", {"limit": "1"})
    assert resp.status_code == status.HTTP_200_OK
    assert resp.json() == {"count": 2, "items": [{"path": "/api/draft/pick"}]}

    resp = admin_client.delete("/api/debug/slow-requests/")
    assert resp.status_code == status.HTTP_200_OK
    assert resp.json() == {"success": True}
    assert cache.get(SLOW_REQUESTS_CACHE_KEY) == []


@pytest.mark.django_db
def test_slow_requests_endpoint_tolerates_corrupt_cache(
    admin_client: APIClient,
) -> None:
    """A non-list cache value is reported as an empty buffer."""
    cache.set(SLOW_REQUESTS_CACHE_KEY, "garbage")

    resp = admin_client.get("/api/debug/slow-requests/")
    assert resp.status_code == status.HTTP_200_OK
    assert resp.json() == {"count": 0, "items": []}


@pytest.mark.django_db
def test_slow_requests_endpoint_filters_by_match(admin_client: APIClient) -> None:
    """matchId narrows the listing to one match's requests."""
    match_id = str(uuid4())
    cache.set(
        SLOW_REQUESTS_CACHE_KEY,
        [
            {"path": "/api/draft/pick", "match_id": match_id},
            {"path": "/api/players/", "match_id": None},
            {"path": "/api/draft/state", "match_id": match_id},
        ],
    )

    resp = admin_client.get("/api/debug/slow-requests/", {"matchId": match_id})

    assert resp.status_code == status.HTTP_200_OK
    assert resp.json()["count"] == 2  # noqa: PLR2004
    assert [item["path"] for item in resp.json()["items"]] == [
        "/api/draft/pick",
        "/api/draft/state",
    ]


@pytest.mark.django_db
@pytest.mark.parametrize("query", [{"limit": "abc"}, {"limit": "0"}, {"matchId": "x"}])
def test_slow_requests_endpoint_validates_query(
    admin_client: APIClient,
    query: dict[str, str],
) -> None:
    """Malformed query parameters are rejected."""
    resp = admin_client.get("/api/debug/slow-requests/", query)

    assert resp.status_code == status.HTTP_400_BAD_REQUEST

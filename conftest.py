"""Pytest configuration for the triatapp Django project.

Production settings may enable SSL redirect. API tests call endpoints via plain
HTTP (the default test client scheme), which would cause 301 redirects and make
status code assertions brittle.

For tests we disable `SECURE_SSL_REDIRECT` by default and start every test
with an empty cache; individual tests that need redirect behaviour can
override the setting explicitly.
"""

from __future__ import annotations

from collections.abc import Iterator

from django.core.cache import cache
import pytest
from pytest_django.fixtures import SettingsWrapper


@pytest.fixture(autouse=True)
def _disable_secure_ssl_redirect(settings: SettingsWrapper) -> None:
    settings.SECURE_SSL_REDIRECT = False


@pytest.fixture(autouse=True)
def _clear_cache() -> Iterator[None]:
    cache.clear()
    yield
    cache.clear()

"""Test settings for the triatapp project.

Mirrors the production configuration but replaces external service dependencies
(Postgres, Redis/Valkey) with local backends so the test suite can run without
additional infrastructure.
"""

from __future__ import annotations

import os

from .settings import *  # noqa: F403
from .settings.env import BASE_DIR
from .settings.services import DATABASES


# In-memory cache (avoid Valkey/Redis during tests)
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "triatapp-test-cache",
    }
}

SESSION_ENGINE = "django.contrib.sessions.backends.cache"
SESSION_CACHE_ALIAS = "default"

TESTING = True
ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]
SECURE_SSL_REDIRECT = False

# Tests that need a fixed starting team pass their own rng to start_draft.
TRIATAPP_DRAFT_RANDOM_SEED = None


# ---------------------------------------------------------------------------
# Database fallback for tests
# ---------------------------------------------------------------------------
if os.getenv("DJANGO_TEST_USE_POSTGRES", "").lower() not in {"1", "true", "yes", "on"}:
    DATABASES["default"] = {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(BASE_DIR / "test.sqlite3"),
    }

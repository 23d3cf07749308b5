"""Operational tuning flags."""

from __future__ import annotations

from .env import env_bool, env_int


# Slow request surfacing (opt-in). Adds timing headers and keeps a rolling
# buffer (in cache) of the slowest requests so you don't have to tail logs.
TRIATAPP_LOG_SLOW_REQUESTS = env_bool("TRIATAPP_LOG_SLOW_REQUESTS", False)
TRIATAPP_SLOW_REQUEST_MS = env_int("TRIATAPP_SLOW_REQUEST_MS", 500)
TRIATAPP_SLOW_REQUEST_BUFFER_SIZE = env_int("TRIATAPP_SLOW_REQUEST_BUFFER_SIZE", 200)
TRIATAPP_SLOW_REQUEST_BUFFER_TTL_S = env_int(
    "TRIATAPP_SLOW_REQUEST_BUFFER_TTL_S",
    60 * 60 * 24,
)

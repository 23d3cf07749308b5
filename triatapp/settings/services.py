"""External service configuration (DB, cache)."""

from __future__ import annotations

from .env import env, env_int


VALKEY_HOST = env("VALKEY_HOST", "127.0.0.1")
VALKEY_PORT = env_int("VALKEY_PORT", 6379)

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": env("POSTGRES_DB", "triatapp"),
        "USER": env("POSTGRES_USER", "postgres"),
        "PASSWORD": env("POSTGRES_PASSWORD", "postgres"),
        "HOST": env("POSTGRES_HOST", "127.0.0.1"),
        "PORT": env("POSTGRES_PORT", "5432"),
    },
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": f"redis://{VALKEY_HOST}:{VALKEY_PORT}/1",
    },
}

"""Host / CORS / CSRF / security settings."""

from __future__ import annotations

from urllib.parse import urlparse

from .env import env, env_bool, env_int, env_list, sorted_hosts
from .runtime import DEBUG


TRIATAPP_ORIGIN = "https://api.triatapp.app"
WEB_TRIATAPP_ORIGIN = "https://triatapp.app"
LOCAL_API_ORIGIN = "https://api.triatapp.localhost"
LOCAL_WEB_ORIGIN = "https://triatapp.localhost"


def origin_variants(origin: str) -> list[str]:
    """Return predictable origin variants (e.g. `www.`).

    The frontend has been reachable under both the bare and the `www.`
    hostname; CORS/CSRF must accept both.
    """
    origin = (origin or "").strip().rstrip("/")
    if not origin:
        return []

    parsed = urlparse(origin)
    scheme = parsed.scheme or "https"
    netloc = parsed.netloc or parsed.path
    if not netloc:
        return [origin]

    base = netloc.removeprefix("www.")
    return sorted({f"{scheme}://{base}", f"{scheme}://www.{base}", origin})


WEB_APP_ORIGIN = env(
    "WEB_APP_ORIGIN",
    LOCAL_WEB_ORIGIN if DEBUG else WEB_TRIATAPP_ORIGIN,
).rstrip("/")

default_hosts = "triatapp.app,api.triatapp.app"
ALLOWED_HOSTS = sorted_hosts(env_list("ALLOWED_HOSTS", default_hosts))

_default_csrf_trusted = ",".join([
    TRIATAPP_ORIGIN,
    *origin_variants(WEB_TRIATAPP_ORIGIN),
])
CSRF_TRUSTED_ORIGINS = env_list("CSRF_TRUSTED_ORIGINS", _default_csrf_trusted)

_default_cors_allowed = ",".join(origin_variants(WEB_TRIATAPP_ORIGIN))
CORS_ALLOWED_ORIGINS = sorted_hosts(
    env_list("CORS_ALLOWED_ORIGINS", _default_cors_allowed),
)
CORS_ALLOW_CREDENTIALS = env_bool("CORS_ALLOW_CREDENTIALS", True)

if DEBUG:
    ALLOWED_HOSTS = sorted_hosts([
        *ALLOWED_HOSTS,
        "localhost",
        "127.0.0.1",
        "triatapp.localhost",
        "api.triatapp.localhost",
    ])
    CSRF_TRUSTED_ORIGINS = sorted({
        *CSRF_TRUSTED_ORIGINS,
        LOCAL_API_ORIGIN,
        LOCAL_WEB_ORIGIN,
    })
    CORS_ALLOWED_ORIGINS = sorted_hosts([
        *CORS_ALLOWED_ORIGINS,
        LOCAL_WEB_ORIGIN,
        LOCAL_API_ORIGIN,
        # Next.js / Vite dev servers
        "http://localhost:3000",
        "http://localhost:5173",
    ])

SECURE_SSL_REDIRECT = env_bool("SECURE_SSL_REDIRECT", not DEBUG)

# TLS is terminated by the reverse proxy in front of Django.
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

SECURE_HSTS_SECONDS = env_int("SECURE_HSTS_SECONDS", 31536000 if not DEBUG else 0)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env_bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", not DEBUG)
SECURE_HSTS_PRELOAD = env_bool("SECURE_HSTS_PRELOAD", not DEBUG)
SESSION_COOKIE_SECURE = env_bool("SESSION_COOKIE_SECURE", not DEBUG)
CSRF_COOKIE_SECURE = env_bool("CSRF_COOKIE_SECURE", not DEBUG)
X_FRAME_OPTIONS = env("X_FRAME_OPTIONS", "SAMEORIGIN")

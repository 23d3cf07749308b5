"""Django settings entrypoint for the triatapp project.

Settings are split into small modules per concern (services, security, etc.).
The public entrypoint remains `DJANGO_SETTINGS_MODULE=triatapp.settings`.
"""

from __future__ import annotations

# Core Django configuration
from .django_core import (  # noqa: F401
    ASGI_APPLICATION,
    DEFAULT_AUTO_FIELD,
    INSTALLED_APPS,
    MIDDLEWARE,
    ROOT_URLCONF,
    SESSION_ENGINE,
    STATIC_URL,
    TEMPLATES,
    WSGI_APPLICATION,
)

# Draft configuration
from .draft import (  # noqa: F401
    TRIATAPP_DEFAULT_TEAMS,
    TRIATAPP_DRAFT_RANDOM_SEED,
)

# i18n
from .i18n import *  # noqa: F403

# Logging
from .log_config import LOGGING, TRIATAPP_LOG_LEVEL  # noqa: F401

# App performance switches
from .performance import (  # noqa: F401
    TRIATAPP_LOG_SLOW_REQUESTS,
    TRIATAPP_SLOW_REQUEST_BUFFER_SIZE,
    TRIATAPP_SLOW_REQUEST_BUFFER_TTL_S,
    TRIATAPP_SLOW_REQUEST_MS,
)

# REST / schema
from .rest import *  # noqa: F403

# Runtime flags (DEBUG, SECRET_KEY, etc.)
from .runtime import *  # noqa: F403

# Security (hosts/CORS/CSRF + web app origin)
from .security import (  # noqa: F401
    ALLOWED_HOSTS,
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOWED_ORIGINS,
    CSRF_COOKIE_SECURE,
    CSRF_TRUSTED_ORIGINS,
    SECURE_HSTS_INCLUDE_SUBDOMAINS,
    SECURE_HSTS_PRELOAD,
    SECURE_HSTS_SECONDS,
    SECURE_PROXY_SSL_HEADER,
    SECURE_SSL_REDIRECT,
    SESSION_COOKIE_SECURE,
    WEB_APP_ORIGIN,
    X_FRAME_OPTIONS,
)

# Services
from .services import (  # noqa: F401
    CACHES,
    DATABASES,
    VALKEY_HOST,
    VALKEY_PORT,
)

"""Django REST Framework and OpenAPI config."""

from __future__ import annotations


# TriatAPP has no user accounts: the API is open to the SPA. The admin site
# and operational endpoints still rely on Django sessions.
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.SessionAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
}

SPECTACULAR_SETTINGS = {
    "TITLE": "TriatAPP API",
    "DESCRIPTION": "Roster, matches, draft (triaje) and lineups for pickup football",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

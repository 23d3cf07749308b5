"""Internationalization / localization."""

from __future__ import annotations

from .env import env


LANGUAGE_CODE = env("LANGUAGE_CODE", "es-es")
TIME_ZONE = env("TIME_ZONE", "Europe/Madrid")
USE_I18N = True
USE_TZ = True

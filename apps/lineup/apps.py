"""Lineup app configuration."""

from django.apps import AppConfig


class LineupConfig(AppConfig):
    """Lineup app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.lineup"

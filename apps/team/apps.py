"""Team app configuration."""

from django.apps import AppConfig


class TeamConfig(AppConfig):
    """Team app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.team"

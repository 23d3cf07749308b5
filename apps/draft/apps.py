"""Draft app configuration."""

from django.apps import AppConfig


class DraftConfig(AppConfig):
    """Draft app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.draft"

"""Create the configured draft teams."""

from __future__ import annotations

import logging

from django.conf import settings

from apps.team.models import Team


logger = logging.getLogger(__name__)


def initialize_teams() -> list[Team]:
    """Create every configured default team that does not exist yet.

    Existing teams are left untouched, including their names.

    Returns:
        list[Team]: The teams that were created (empty when nothing was missing).

    """
    defaults = settings.TRIATAPP_DEFAULT_TEAMS
    existing = set(
        Team.objects.filter(id__in=[team["id"] for team in defaults]).values_list(
            "id", flat=True
        )
    )
    created = Team.objects.bulk_create(
        [
            Team(id=team["id"], name=team["name"])
            for team in defaults
            if team["id"] not in existing
        ]
    )
    if created:
        logger.info("Created teams: %s", ", ".join(team.id for team in created))
    return created

"""Create the two draft teams when they are missing.

Example:
    python manage.py init_teams

"""

from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand

from apps.team.services.initialize import initialize_teams


class Command(BaseCommand):
    """Create the configured default teams."""

    help = "Create the configured draft teams that do not exist yet."

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ANN401
        """Run the initializer."""
        created = initialize_teams()
        if not created:
            self.stdout.write(self.style.SUCCESS("Teams already initialized."))
            return
        names = ", ".join(team.id for team in created)
        self.stdout.write(self.style.SUCCESS(f"Created teams: {names}"))

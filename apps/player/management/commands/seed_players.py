"""Replace the roster with the sample players.

Example:
    python manage.py seed_players --yes

Notes:
    This deletes every existing player together with their availability,
    stats, draft picks and lineup placements.

"""

from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from apps.player.models import Player
from apps.player.services.samples import initialize_sample_players


class Command(BaseCommand):
    """Seed the database with the sample roster."""

    help = "Replace all players with the sample roster."

    def add_arguments(self, parser: Any) -> None:  # noqa: ANN401
        """Register CLI arguments for this command."""
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Confirm deleting the existing roster when it is not empty.",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ANN401
        """Run the seed."""
        existing = Player.objects.count()
        if existing and not options.get("yes"):
            msg = f"{existing} players exist; pass --yes to replace them."
            raise CommandError(msg)

        players = initialize_sample_players()
        self.stdout.write(
            self.style.SUCCESS(f"Seeded {len(players)} players (replaced {existing}).")
        )

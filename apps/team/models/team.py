"""Model file for Team."""

from __future__ import annotations

from django.db import models


class Team(models.Model):
    """Model for Team.

    Teams use a short string key (``"borjas"``, ``"nietos"``) instead of a
    UUID because clients refer to them by that key.
    """

    id: models.CharField[str, str] = models.CharField(
        primary_key=True,
        max_length=64,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255)

    def __str__(self) -> str:
        """Get the string representation of the team.

        Returns:
            str: The name of the team.

        """
        return str(self.name)

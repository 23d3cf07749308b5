"""Module contains the per-match availability pool."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7


class MatchAvailablePlayer(models.Model):
    """Whether a player can be drafted in a given match."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.Match",
        on_delete=models.CASCADE,
        related_name="available_players",
    )
    player: models.ForeignKey[Any, Any] = models.ForeignKey(
        "player.Player",
        on_delete=models.CASCADE,
        related_name="match_availability",
    )
    is_available: models.BooleanField[bool, bool] = models.BooleanField(
        default=True
    )
    created_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now_add=True
    )
    updated_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        """Meta class for MatchAvailablePlayer model."""

        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["match", "player"],
                name="unique_match_available_player",
            ),
        ]

    def __str__(self) -> str:
        """Return the string representation of the availability row.

        Returns:
            str: Player, match and availability flag.

        """
        flag = "available" if self.is_available else "unavailable"
        return f"{self.player} @ {self.match} ({flag})"

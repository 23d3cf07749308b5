"""Module contains per-match player statistics."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7


class PlayerMatchStats(models.Model):
    """Goals, assists and saves of one player in one match."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.Match",
        on_delete=models.CASCADE,
        related_name="player_stats",
    )
    player: models.ForeignKey[Any, Any] = models.ForeignKey(
        "player.Player",
        on_delete=models.CASCADE,
        related_name="match_stats",
    )
    team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "team.Team",
        on_delete=models.CASCADE,
        related_name="player_match_stats",
    )
    goals: models.PositiveIntegerField[int, int] = models.PositiveIntegerField(
        default=0
    )
    assists: models.PositiveIntegerField[int, int] = models.PositiveIntegerField(
        default=0
    )
    saves: models.PositiveIntegerField[int, int] = models.PositiveIntegerField(
        default=0
    )
    goals_saved: models.PositiveIntegerField[int, int] = (
        models.PositiveIntegerField(default=0)
    )
    created_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now_add=True
    )
    updated_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        """Meta class for PlayerMatchStats model."""

        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["match", "player"],
                name="unique_player_match_stats",
            ),
        ]

    def __str__(self) -> str:
        """Return the string representation of the stats row.

        Returns:
            str: Player and match.

        """
        return f"{self.player} @ {self.match}"

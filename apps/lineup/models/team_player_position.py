"""Module contains the TeamPlayerPosition model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.player.models import Position


class TeamPlayerPosition(models.Model):
    """Placement of a player in a team's lineup.

    ``match`` is null for placements made outside of any match.
    """

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "team.Team",
        on_delete=models.CASCADE,
        related_name="player_positions",
    )
    player: models.ForeignKey[Any, Any] = models.ForeignKey(
        "player.Player",
        on_delete=models.CASCADE,
        related_name="team_positions",
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.Match",
        on_delete=models.CASCADE,
        related_name="team_player_positions",
        blank=True,
        null=True,
    )
    position: models.CharField[str, str] = models.CharField(
        max_length=3,
        choices=Position.choices,
    )
    position_order: models.IntegerField[int, int] = models.IntegerField(default=0)
    created_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now_add=True
    )
    updated_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        """Meta class for TeamPlayerPosition model."""

        ordering: ClassVar[list[str]] = ["position_order"]
        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["team", "player", "match"],
                name="unique_team_player_match_position",
            ),
            models.UniqueConstraint(
                fields=["team", "player"],
                condition=models.Q(match__isnull=True),
                name="unique_team_player_position_without_match",
            ),
        ]

    def __str__(self) -> str:
        """Return the string representation of the placement.

        Returns:
            str: Team, position and player.

        """
        return f"{self.team_id} {self.position}: {self.player}"  # type: ignore[attr-defined]

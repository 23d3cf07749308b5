"""Module contains the DraftHistoryEntry model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7


class DraftHistoryEntry(models.Model):
    """One pick of the draft. Rows are only ever appended or wiped."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "team.Team",
        on_delete=models.CASCADE,
        related_name="draft_picks",
    )
    player: models.ForeignKey[Any, Any] = models.ForeignKey(
        "player.Player",
        on_delete=models.CASCADE,
        related_name="draft_picks",
    )
    pick_order: models.PositiveIntegerField[int, int] = models.PositiveIntegerField()
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.Match",
        on_delete=models.CASCADE,
        related_name="draft_history",
        blank=True,
        null=True,
    )
    created_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now_add=True
    )

    class Meta:
        """Meta class for DraftHistoryEntry model."""

        ordering: ClassVar[list[str]] = ["pick_order"]
        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["match", "pick_order"],
                name="unique_pick_order_per_match",
            ),
            models.UniqueConstraint(
                fields=["pick_order"],
                condition=models.Q(match__isnull=True),
                name="unique_pick_order_without_match",
            ),
        ]

    def __str__(self) -> str:
        """Return the string representation of the pick.

        Returns:
            str: Pick number, team and player.

        """
        return f"#{self.pick_order} {self.team_id}: {self.player}"  # type: ignore[attr-defined]

"""Module contains the DraftState model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7


DRAFT_STATE_KEY = "current"


class DraftState(models.Model):
    """Whose turn it is in the draft of one match.

    There is at most one row per match, plus at most one match-less row for
    drafts that are not scoped to a match.
    """

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    key: models.CharField[str, str] = models.CharField(
        max_length=32,
        default=DRAFT_STATE_KEY,
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.Match",
        on_delete=models.CASCADE,
        related_name="draft_states",
        blank=True,
        null=True,
    )
    current_team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "team.Team",
        on_delete=models.SET_NULL,
        related_name="+",
        blank=True,
        null=True,
    )
    is_active: models.BooleanField[bool, bool] = models.BooleanField(default=False)
    updated_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        """Meta class for DraftState model."""

        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["key", "match"],
                name="unique_draft_state_per_match",
            ),
            models.UniqueConstraint(
                fields=["key"],
                condition=models.Q(match__isnull=True),
                name="unique_draft_state_without_match",
            ),
        ]

    def __str__(self) -> str:
        """Return the string representation of the draft state.

        Returns:
            str: Match and turn.

        """
        turn = self.current_team_id if self.is_active else "inactive"  # type: ignore[attr-defined]
        return f"Draft {self.match_id or '-'}: {turn}"  # type: ignore[attr-defined]

"""Module contains the Match model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7


class MatchStatus(models.TextChoices):
    """Lifecycle of a match."""

    PENDING = "PENDING", "Pending"
    FINISHED = "FINISHED", "Finished"


class Match(models.Model):
    """Model for Match."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255)
    # Stored as sent by the client (usually an ISO date).
    date: models.CharField[str, str] = models.CharField(max_length=64)
    location: models.CharField[str | None, str | None] = models.CharField(
        max_length=255,
        blank=True,
        null=True,
    )
    status: models.CharField[str, str] = models.CharField(
        max_length=16,
        choices=MatchStatus.choices,
        default=MatchStatus.PENDING,
    )
    created_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now_add=True
    )
    updated_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        """Meta class for Match model."""

        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["created_at"], name="match_created_at_idx"),
        ]

    def __str__(self) -> str:
        """Return the string representation of the match.

        Returns:
            str: Name and date of the match.

        """
        return f"{self.name} ({self.date})"

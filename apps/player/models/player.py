"""Module contains the Player model for the player app."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from django.db import models
from uuid6 import uuid7


class Position(models.TextChoices):
    """Lineup slot codes.

    The six outfield slots hold a single player each; ``SUB`` is the bench and
    may hold any number of players.
    """

    GK = "GK", "Goalkeeper"
    CL = "CL", "Centre back left"
    CR = "CR", "Centre back right"
    ML = "ML", "Midfield left"
    MR = "MR", "Midfield right"
    ST = "ST", "Striker"
    SUB = "SUB", "Substitute"


class Player(models.Model):
    """Model for Player."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255)
    nickname: models.CharField[str | None, str | None] = models.CharField(
        max_length=255,
        blank=True,
        null=True,
    )
    position: models.CharField[str | None, str | None] = models.CharField(
        max_length=3,
        choices=Position.choices,
        blank=True,
        null=True,
    )
    number: models.PositiveSmallIntegerField[int | None, int | None] = (
        models.PositiveSmallIntegerField(blank=True, null=True)
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
    rating: models.IntegerField[int, int] = models.IntegerField(default=80)

    created_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now_add=True
    )
    updated_at: models.DateTimeField[datetime, datetime] = models.DateTimeField(
        auto_now=True
    )

    class Meta:
        """Meta class for Player model."""

        ordering: ClassVar[list[str]] = ["name"]

    def __str__(self) -> str:
        """Get the string representation of the player.

        Returns:
            str: The nickname when set, otherwise the full name.

        """
        return str(self.nickname or self.name)

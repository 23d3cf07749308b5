"""Serializers for team API endpoints."""

from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from apps.team.models.team import Team


class TeamSerializer(serializers.ModelSerializer):
    """Serializer for Team model."""

    class Meta:
        """Meta class for TeamSerializer."""

        model = Team
        fields: ClassVar[list[str]] = ["id", "name"]

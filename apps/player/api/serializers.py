"""Serializers for player API endpoints."""

from __future__ import annotations

from typing import Any, ClassVar

from rest_framework import serializers

from apps.player.models.player import Player
from apps.player.services.rating import RATING_STAT_FIELDS, compute_rating


class PlayerSerializer(serializers.ModelSerializer):
    """Serializer for Player model.

    ``rating`` is optional on write. When it is omitted the rating is derived
    from the four stat fields, on create and whenever one of them changes.
    """

    id = serializers.UUIDField(source="id_uuid", read_only=True)
    rating = serializers.IntegerField(required=False)

    class Meta:
        """Meta class for PlayerSerializer."""

        model = Player
        fields: ClassVar[list[str]] = [
            "id",
            "name",
            "nickname",
            "position",
            "number",
            "goals",
            "assists",
            "saves",
            "goals_saved",
            "rating",
            "created_at",
            "updated_at",
        ]
        read_only_fields: ClassVar[list[str]] = ["id", "created_at", "updated_at"]

    def validate_name(self, value: str) -> str:
        """Reject names that are only whitespace.

        Returns:
            str: The trimmed name.

        Raises:
            serializers.ValidationError: If the name is blank.

        """
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        return value

    def create(self, validated_data: dict[str, Any]) -> Player:
        """Create a player, deriving the rating when none was sent.

        Returns:
            Player: The created player.

        """
        if "rating" not in validated_data:
            validated_data["rating"] = compute_rating(
                **{field: validated_data.get(field, 0) for field in RATING_STAT_FIELDS}
            )
        return super().create(validated_data)

    def update(self, instance: Player, validated_data: dict[str, Any]) -> Player:
        """Update a player, re-deriving the rating when a stat changes.

        Returns:
            Player: The updated player.

        """
        stats_changed = any(field in validated_data for field in RATING_STAT_FIELDS)
        if stats_changed and "rating" not in validated_data:
            validated_data["rating"] = compute_rating(
                **{
                    field: validated_data.get(field, getattr(instance, field))
                    for field in RATING_STAT_FIELDS
                }
            )
        return super().update(instance, validated_data)

"""Serializers for schedule API endpoints."""

from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from apps.schedule.models import Match, MatchStatus, PlayerMatchStats


class MatchSerializer(serializers.ModelSerializer):
    """Serializer for Match model."""

    id = serializers.UUIDField(source="id_uuid", read_only=True)

    class Meta:
        """Meta class for MatchSerializer."""

        model = Match
        fields: ClassVar[list[str]] = [
            "id",
            "name",
            "date",
            "location",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields: ClassVar[list[str]] = fields


class MatchCreateSerializer(serializers.Serializer):
    """Payload for creating a match."""

    name = serializers.CharField(max_length=255)
    date = serializers.CharField(max_length=64)
    location = serializers.CharField(
        max_length=255,
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    availablePlayers = serializers.ListField(  # noqa: N815
        child=serializers.UUIDField(),
        allow_empty=False,
    )


class MatchUpdateSerializer(serializers.Serializer):
    """Payload for renaming/rescheduling a match."""

    name = serializers.CharField(max_length=255)
    date = serializers.CharField(max_length=64)


class MatchStatusSerializer(serializers.Serializer):
    """Payload for changing a match's status."""

    status = serializers.ChoiceField(choices=MatchStatus.choices)


class AvailablePlayersSerializer(serializers.Serializer):
    """Payload for replacing a match's availability pool."""

    playerIds = serializers.ListField(  # noqa: N815
        child=serializers.UUIDField(),
        allow_empty=True,
    )


class PlayerMatchStatsSerializer(serializers.ModelSerializer):
    """Read serializer for PlayerMatchStats."""

    id = serializers.UUIDField(source="id_uuid", read_only=True)
    match_id = serializers.UUIDField(read_only=True)
    player_id = serializers.UUIDField(read_only=True)
    team_id = serializers.CharField(read_only=True)

    class Meta:
        """Meta class for PlayerMatchStatsSerializer."""

        model = PlayerMatchStats
        fields: ClassVar[list[str]] = [
            "id",
            "match_id",
            "player_id",
            "team_id",
            "goals",
            "assists",
            "saves",
            "goals_saved",
            "created_at",
            "updated_at",
        ]
        read_only_fields: ClassVar[list[str]] = fields


class PlayerMatchStatsWriteSerializer(serializers.Serializer):
    """Payload for saving one player's stats in a match."""

    player_id = serializers.UUIDField()
    team_id = serializers.CharField(max_length=64)
    goals = serializers.IntegerField(min_value=0, default=0)
    assists = serializers.IntegerField(min_value=0, default=0)
    saves = serializers.IntegerField(min_value=0, default=0)
    goals_saved = serializers.IntegerField(min_value=0, default=0)

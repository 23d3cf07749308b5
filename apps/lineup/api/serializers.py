"""Serializers for lineup API payloads."""

from __future__ import annotations

from rest_framework import serializers

from apps.player.models import Position


class LineupScopeSerializer(serializers.Serializer):
    """Payload carrying an optional match id."""

    matchId = serializers.UUIDField(required=False, allow_null=True)  # noqa: N815


class LineupPlayerSerializer(LineupScopeSerializer):
    """Payload identifying a player on a team."""

    teamId = serializers.CharField(max_length=64)  # noqa: N815
    playerId = serializers.UUIDField()  # noqa: N815


class LineupSaveSerializer(LineupPlayerSerializer):
    """Payload for placing a player in a slot."""

    position = serializers.ChoiceField(choices=Position.choices)
    order = serializers.IntegerField(required=False, default=0)

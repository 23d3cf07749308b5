"""Serializers for draft API payloads."""

from __future__ import annotations

from rest_framework import serializers


class DraftMatchSerializer(serializers.Serializer):
    """Payload carrying an optional match id."""

    matchId = serializers.UUIDField(required=False, allow_null=True)  # noqa: N815


class DraftPickSerializer(DraftMatchSerializer):
    """Payload for a pick."""

    teamId = serializers.CharField(max_length=64)  # noqa: N815
    playerId = serializers.UUIDField()  # noqa: N815

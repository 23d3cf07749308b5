"""Admin classes for matches, availability and per-match stats."""

from typing import TYPE_CHECKING, ClassVar

from django.contrib import admin

from apps.schedule.models import Match, MatchAvailablePlayer, PlayerMatchStats


if TYPE_CHECKING:
    from django.contrib.admin import (
        ModelAdmin as ModelAdminBase,
        TabularInline as TabularInlineBase,
    )

    MatchAdminBase = ModelAdminBase[Match]
    MatchAvailablePlayerAdminBase = ModelAdminBase[MatchAvailablePlayer]
    PlayerMatchStatsAdminBase = ModelAdminBase[PlayerMatchStats]
    MatchAvailablePlayerInlineBase = TabularInlineBase[MatchAvailablePlayer, Match]
else:
    MatchAdminBase = admin.ModelAdmin
    MatchAvailablePlayerAdminBase = admin.ModelAdmin
    PlayerMatchStatsAdminBase = admin.ModelAdmin
    MatchAvailablePlayerInlineBase = admin.TabularInline


class MatchAvailablePlayerInline(MatchAvailablePlayerInlineBase):
    """Inline admin showing the availability pool of a match."""

    model = MatchAvailablePlayer
    extra = 0
    fields: ClassVar[list[str]] = ["player", "is_available"]


class MatchAdmin(MatchAdminBase):
    """Admin class for the Match model."""

    list_display: ClassVar[list[str]] = [
        "id_uuid",
        "name",
        "date",
        "location",
        "status",
        "created_at",
    ]
    list_filter: ClassVar[list[str]] = ["status"]
    search_fields: ClassVar[list[str]] = ["id_uuid", "name", "location"]
    show_full_result_count = False
    inlines: ClassVar[list[type]] = [MatchAvailablePlayerInline]

    class Meta:
        """Meta class for the Match model."""

        model = Match


class MatchAvailablePlayerAdmin(MatchAvailablePlayerAdminBase):
    """Admin class for the MatchAvailablePlayer model."""

    list_display: ClassVar[list[str]] = ["match", "player", "is_available"]
    list_filter: ClassVar[list[str]] = ["is_available"]
    show_full_result_count = False

    class Meta:
        """Meta class for the MatchAvailablePlayer model."""

        model = MatchAvailablePlayer


class PlayerMatchStatsAdmin(PlayerMatchStatsAdminBase):
    """Admin class for the PlayerMatchStats model."""

    list_display: ClassVar[list[str]] = [
        "match",
        "player",
        "team",
        "goals",
        "assists",
        "saves",
        "goals_saved",
    ]
    list_filter: ClassVar[list[str]] = ["team"]
    show_full_result_count = False

    class Meta:
        """Meta class for the PlayerMatchStats model."""

        model = PlayerMatchStats


admin.site.register(Match, MatchAdmin)
admin.site.register(MatchAvailablePlayer, MatchAvailablePlayerAdmin)
admin.site.register(PlayerMatchStats, PlayerMatchStatsAdmin)

"""Admin class for the TeamPlayerPosition model."""

from typing import TYPE_CHECKING, ClassVar

from django.contrib import admin

from apps.lineup.models import TeamPlayerPosition


if TYPE_CHECKING:
    from django.contrib.admin import ModelAdmin as ModelAdminBase

    TeamPlayerPositionAdminBase = ModelAdminBase[TeamPlayerPosition]
else:
    TeamPlayerPositionAdminBase = admin.ModelAdmin


class TeamPlayerPositionAdmin(TeamPlayerPositionAdminBase):
    """Admin class for the TeamPlayerPosition model."""

    list_display: ClassVar[list[str]] = [
        "match",
        "team",
        "position",
        "position_order",
        "player",
    ]
    list_filter: ClassVar[list[str]] = ["team", "position"]
    show_full_result_count = False

    class Meta:
        """Meta class for the TeamPlayerPosition model."""

        model = TeamPlayerPosition


admin.site.register(TeamPlayerPosition, TeamPlayerPositionAdmin)

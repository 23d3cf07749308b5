"""Admin configuration for the Player model."""

from typing import TYPE_CHECKING, ClassVar

from django.contrib import admin

from apps.player.models import Player


if TYPE_CHECKING:
    from django.contrib.admin import ModelAdmin as ModelAdminBase

    PlayerModelAdminBase = ModelAdminBase[Player]
else:
    PlayerModelAdminBase = admin.ModelAdmin


class PlayerAdmin(PlayerModelAdminBase):
    """Player admin configuration."""

    list_display: ClassVar[list[str]] = [
        "id_uuid",
        "name",
        "nickname",
        "position",
        "number",
        "rating",
    ]
    list_filter: ClassVar[list[str]] = ["position"]
    search_fields: ClassVar[list[str]] = ["id_uuid", "name", "nickname"]
    readonly_fields: ClassVar[list[str]] = ["created_at", "updated_at"]
    show_full_result_count = False

    class Meta:
        """Meta class."""

        model = Player


admin.site.register(Player, PlayerAdmin)

"""Admin classes for the draft models."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from django.contrib import admin
from django.http import HttpRequest

from apps.draft.models import DraftHistoryEntry, DraftState


if TYPE_CHECKING:
    from django.contrib.admin import ModelAdmin as ModelAdminBase

    DraftStateAdminBase = ModelAdminBase[DraftState]
    DraftHistoryEntryAdminBase = ModelAdminBase[DraftHistoryEntry]
else:
    DraftStateAdminBase = admin.ModelAdmin
    DraftHistoryEntryAdminBase = admin.ModelAdmin


class DraftStateAdmin(DraftStateAdminBase):
    """Admin class for the DraftState model."""

    list_display: ClassVar[list[str]] = [
        "key",
        "match",
        "current_team",
        "is_active",
        "updated_at",
    ]
    list_filter: ClassVar[list[str]] = ["is_active"]
    show_full_result_count = False

    class Meta:
        """Meta class for the DraftState model."""

        model = DraftState


class DraftHistoryEntryAdmin(DraftHistoryEntryAdminBase):
    """Admin class for draft picks."""

    list_display: ClassVar[list[str]] = [
        "match",
        "pick_order",
        "team",
        "player",
        "created_at",
    ]
    list_filter: ClassVar[list[str]] = ["team"]
    show_full_result_count = False

    class Meta:
        """Meta class for the DraftHistoryEntry model."""

        model = DraftHistoryEntry

    def has_change_permission(
        self,
        request: HttpRequest,
        obj: DraftHistoryEntry | None = None,
    ) -> bool:
        """Picks are immutable once recorded."""
        return False


admin.site.register(DraftState, DraftStateAdmin)
admin.site.register(DraftHistoryEntry, DraftHistoryEntryAdmin)

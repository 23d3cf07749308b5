"""Package contains the admin classes for the draft app."""

from .draft_admin import DraftHistoryEntryAdmin, DraftStateAdmin


__all__ = [
    "DraftHistoryEntryAdmin",
    "DraftStateAdmin",
]

"""Package contains the models for the draft app."""

from .draft_history import DraftHistoryEntry
from .draft_state import DRAFT_STATE_KEY, DraftState


__all__ = [
    "DRAFT_STATE_KEY",
    "DraftHistoryEntry",
    "DraftState",
]

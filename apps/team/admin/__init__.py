"""Package contains the admin classes for the team app."""

from .team_admin import TeamAdmin


__all__ = [
    "TeamAdmin",
]

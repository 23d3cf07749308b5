"""Package for the team models."""

from .team import Team


__all__ = [
    "Team",
]

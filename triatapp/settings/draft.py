"""Draft (triaje) configuration."""

from __future__ import annotations

from .env import env, env_optional_int


# The draft alternates between exactly two teams. Ids are stable because the
# frontend keys its colours on them.
TRIATAPP_DEFAULT_TEAMS: tuple[dict[str, str], ...] = (
    {"id": "borjas", "name": env("TRIATAPP_TEAM_A_NAME", "Equipo A")},
    {"id": "nietos", "name": env("TRIATAPP_TEAM_B_NAME", "Equipo B")},
)

# Only set this to make the starting team reproducible (demos, debugging).
TRIATAPP_DRAFT_RANDOM_SEED = env_optional_int("TRIATAPP_DRAFT_RANDOM_SEED")

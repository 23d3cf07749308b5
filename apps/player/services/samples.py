"""Sample roster used to bootstrap a fresh installation."""

from __future__ import annotations

import logging

from django.db import transaction

from apps.player.models import Player


logger = logging.getLogger(__name__)


SAMPLE_PLAYERS: tuple[dict[str, str | int], ...] = (
    {"name": "Alejandro Rubert", "nickname": "Rubert", "position": "ST", "number": 9},
    {"name": "David Nieto", "nickname": "NietakO", "position": "GK", "number": 1},
    {"name": "Eloy Ramon", "nickname": "Eloy", "position": "CR", "number": 2},
    {"name": "Borja Monzonis", "nickname": "Casper", "position": "ST", "number": 10},
    {"name": "Dani Gil", "nickname": "Gilito", "position": "MR", "number": 8},
    {"name": "Sergi Campos", "nickname": "Sergi", "position": "ML", "number": 7},
    {"name": "Lluis Miravet", "nickname": "Lluismi", "position": "ML", "number": 11},
    {"name": "Alex Seglar", "nickname": "Seru", "position": "CL", "number": 4},
    {"name": "Jordan", "nickname": "Jordan", "position": "MR", "number": 6},
    {"name": "Albert", "nickname": "CRFAN", "position": "CL", "number": 5},
    {"name": "Jordi", "nickname": "Jordi", "position": "CR", "number": 3},
    {"name": "Serrano", "nickname": "Serrano", "position": "GK", "number": 13},
    {"name": "Lluis Porta", "nickname": "Porta", "position": "ML", "number": 14},
    {"name": "Carlos Font", "nickname": "Carlitros", "position": "ST", "number": 11},
)

SAMPLE_RATING = 80


def initialize_sample_players() -> list[Player]:
    """Replace the whole roster with the sample players.

    Existing players are deleted first; anything that references them
    (availability, stats, draft history, lineups) goes with them.

    Returns:
        list[Player]: The freshly created players.

    """
    with transaction.atomic():
        deleted, _ = Player.objects.all().delete()
        players = Player.objects.bulk_create(
            [Player(rating=SAMPLE_RATING, **data) for data in SAMPLE_PLAYERS]
        )

    logger.info(
        "Sample roster initialized (%s players created, %s rows removed)",
        len(players),
        deleted,
    )
    return players

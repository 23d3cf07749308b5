"""Create TeamPlayerPosition."""

from __future__ import annotations

from django.db import migrations, models
from uuid6 import uuid7


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("player", "0001_initial"),
        ("schedule", "0001_initial"),
        ("team", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="TeamPlayerPosition",
            fields=[
                (
                    "id_uuid",
                    models.UUIDField(
                        default=uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "position",
                    models.CharField(
                        choices=[
                            ("GK", "Goalkeeper"),
                            ("CL", "Centre back left"),
                            ("CR", "Centre back right"),
                            ("ML", "Midfield left"),
                            ("MR", "Midfield right"),
                            ("ST", "Striker"),
                            ("SUB", "Substitute"),
                        ],
                        max_length=3,
                    ),
                ),
                ("position_order", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "match",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=models.deletion.CASCADE,
                        related_name="team_player_positions",
                        to="schedule.match",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        on_delete=models.deletion.CASCADE,
                        related_name="team_positions",
                        to="player.player",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=models.deletion.CASCADE,
                        related_name="player_positions",
                        to="team.team",
                    ),
                ),
            ],
            options={
                "ordering": ["position_order"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("team", "player", "match"),
                        name="unique_team_player_match_position",
                    ),
                    models.UniqueConstraint(
                        condition=models.Q(match__isnull=True),
                        fields=("team", "player"),
                        name="unique_team_player_position_without_match",
                    ),
                ],
            },
        ),
    ]

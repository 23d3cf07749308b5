"""Create the Player model."""

from __future__ import annotations

from django.db import migrations, models
from uuid6 import uuid7


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Player",
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
                ("name", models.CharField(max_length=255)),
                (
                    "nickname",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                (
                    "position",
                    models.CharField(
                        blank=True,
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
                        null=True,
                    ),
                ),
                (
                    "number",
                    models.PositiveSmallIntegerField(blank=True, null=True),
                ),
                ("goals", models.PositiveIntegerField(default=0)),
                ("assists", models.PositiveIntegerField(default=0)),
                ("saves", models.PositiveIntegerField(default=0)),
                ("goals_saved", models.PositiveIntegerField(default=0)),
                ("rating", models.IntegerField(default=80)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
    ]

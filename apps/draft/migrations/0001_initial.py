"""Create DraftState and DraftHistoryEntry."""

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
            name="DraftState",
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
                ("key", models.CharField(default="current", max_length=32)),
                ("is_active", models.BooleanField(default=False)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "current_team",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=models.deletion.SET_NULL,
                        related_name="+",
                        to="team.team",
                    ),
                ),
                (
                    "match",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=models.deletion.CASCADE,
                        related_name="draft_states",
                        to="schedule.match",
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(
                        fields=("key", "match"),
                        name="unique_draft_state_per_match",
                    ),
                    models.UniqueConstraint(
                        condition=models.Q(match__isnull=True),
                        fields=("key",),
                        name="unique_draft_state_without_match",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="DraftHistoryEntry",
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
                ("pick_order", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "match",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=models.deletion.CASCADE,
                        related_name="draft_history",
                        to="schedule.match",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        on_delete=models.deletion.CASCADE,
                        related_name="draft_picks",
                        to="player.player",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=models.deletion.CASCADE,
                        related_name="draft_picks",
                        to="team.team",
                    ),
                ),
            ],
            options={
                "ordering": ["pick_order"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("match", "pick_order"),
                        name="unique_pick_order_per_match",
                    ),
                    models.UniqueConstraint(
                        condition=models.Q(match__isnull=True),
                        fields=("pick_order",),
                        name="unique_pick_order_without_match",
                    ),
                ],
            },
        ),
    ]

"""URL routes for lineup API."""

from __future__ import annotations

from django.urls import re_path

from . import views


urlpatterns = [
    re_path(r"^lineups/?$", views.lineups, name="lineups"),
    re_path(r"^lineups/save/?$", views.save, name="lineups-save"),
    re_path(r"^lineups/remove/?$", views.remove, name="lineups-remove"),
    re_path(r"^lineups/reset/?$", views.reset, name="lineups-reset"),
]

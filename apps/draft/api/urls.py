"""URL routes for draft API."""

from __future__ import annotations

from django.urls import re_path

from . import views


# The trailing slash is optional so POSTs are never redirected by APPEND_SLASH.
urlpatterns = [
    re_path(r"^draft/start/?$", views.start, name="draft-start"),
    re_path(r"^draft/pick/?$", views.pick, name="draft-pick"),
    re_path(r"^draft/end/?$", views.end, name="draft-end"),
    re_path(r"^draft/state/?$", views.state, name="draft-state"),
    re_path(r"^draft/history/?$", views.history, name="draft-history"),
]

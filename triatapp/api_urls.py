"""API URL configuration for the TriatAPP project."""

from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)


urlpatterns = [
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    path("", include("apps.player.api.urls")),
    path("", include("apps.team.api.urls")),
    path("", include("apps.schedule.api.urls")),
    path("", include("apps.draft.api.urls")),
    path("", include("apps.lineup.api.urls")),
    path("debug/", include("apps.common.api.urls")),
]

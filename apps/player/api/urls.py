"""URL routes for player API."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import PlayerViewSet


router = DefaultRouter()
# The SPA calls routes both with and without the trailing slash.
router.trailing_slash = "/?"
router.register(r"players", PlayerViewSet)

urlpatterns = [
    path("", include(router.urls)),
]

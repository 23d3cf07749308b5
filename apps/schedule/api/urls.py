"""URL routes for schedule API."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import MatchViewSet


router = DefaultRouter()
# The SPA calls routes both with and without the trailing slash.
router.trailing_slash = "/?"
router.register(r"matches", MatchViewSet)

urlpatterns = [
    path("", include(router.urls)),
]

"""URL routes for team API."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import TeamViewSet


router = DefaultRouter()
# The SPA calls routes both with and without the trailing slash.
router.trailing_slash = "/?"
router.register(r"teams", TeamViewSet)

urlpatterns = [
    path("", include(router.urls)),
]

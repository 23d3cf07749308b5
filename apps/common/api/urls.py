"""Operational API endpoints (admin only)."""

from django.urls import path

from .views import SlowRequestsAPIView


urlpatterns = [
    path("slow-requests/", SlowRequestsAPIView.as_view(), name="slow-requests"),
]

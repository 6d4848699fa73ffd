"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from dashboard.api.views import BoardView

urlpatterns = [
    path("board", BoardView.as_view(), name="board"),
]

"""REST API views for the world clock board."""
from __future__ import annotations

import threading
from functools import lru_cache
from typing import Any, Dict, Iterable

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from worldclock.display import HEADING, PAGE_DESCRIPTION, PAGE_KEYWORDS, PAGE_TITLE, BoardCell
from worldclock.providers import OpenWeatherProvider, RequestConfig
from worldclock.services import WeatherFetcher, WorldClockBoard


def build_fetcher() -> WeatherFetcher:
    if not settings.OPENWEATHER_API_KEY:
        raise ImproperlyConfigured("OPENWEATHER_API_KEY is not configured")
    provider = OpenWeatherProvider(
        api_key=settings.OPENWEATHER_API_KEY,
        base_url=settings.OPENWEATHER_BASE_URL,
        request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
    )
    return WeatherFetcher(provider)


_board_lock = threading.Lock()


@lru_cache(maxsize=1)
def _build_board() -> WorldClockBoard:
    return WorldClockBoard(build_fetcher(), tick_seconds=settings.WORLD_CLOCK_TICK_SECONDS)


def get_board() -> WorldClockBoard:
    # Weather is loaded once per process; times are recomputed per request.
    with _board_lock:
        board = _build_board()
        board.load_weather()
    return board


def reset_board() -> None:
    with _board_lock:
        _build_board.cache_clear()


def _serialize_board(cells: Iterable[BoardCell]) -> Dict[str, Any]:
    return {
        "title": PAGE_TITLE,
        "heading": HEADING,
        "description": PAGE_DESCRIPTION,
        "keywords": PAGE_KEYWORDS,
        "cells": [cell.as_dict() for cell in cells],
    }


class BoardView(APIView):
    """Render the current board as JSON."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return one cell per configured city."""
        try:
            board = get_board()
        except ImproperlyConfigured as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        board.refresh_times()
        return Response(_serialize_board(board.cells()), status=status.HTTP_200_OK)

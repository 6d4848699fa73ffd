"""Cities shown on the board."""
from __future__ import annotations

from typing import Tuple

from .entities import City


DEFAULT_CITIES: Tuple[City, ...] = (
    City("SanJuan", "America/Puerto_Rico"),
    City("Paris", "Europe/Paris"),
    City("Tokyo", "Asia/Tokyo"),
    City("Sydney", "Australia/Sydney"),
    City("Moscow", "Europe/Moscow"),
)


__all__ = ["DEFAULT_CITIES"]

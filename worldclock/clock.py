"""Local time formatting for the configured cities."""
from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, Iterable, Optional
from zoneinfo import ZoneInfo

from .entities import City


@lru_cache(maxsize=None)
def _zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def format_local_time(zone: str, now: Optional[datetime] = None) -> str:
    """Return ``now`` in ``zone`` using the en-US medium time style.

    Twelve-hour clock without a leading zero on the hour, e.g. ``3:07:09 PM``.
    """
    instant = now or datetime.now(tz=timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    local = instant.astimezone(_zone(zone))
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"


def snapshot(cities: Iterable[City], now: Optional[datetime] = None) -> Dict[str, str]:
    """Map every city name to its formatted local time at a single instant."""
    instant = now or datetime.now(tz=timezone.utc)
    return {city.name: format_local_time(city.timezone, instant) for city in cities}


__all__ = ["format_local_time", "snapshot"]

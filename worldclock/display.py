"""Projection of the clock and weather maps into display cells."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .entities import NOT_AVAILABLE, City, WeatherReading
from .icons import DEFAULT_ICON, select_icon


PAGE_TITLE = "Time & Weather Around the World"
PAGE_DESCRIPTION = "Displays current time and weather in various cities around the world."
PAGE_KEYWORDS = "time, weather, world clock, global weather, cities, timezone"
HEADING = "Around the World : Time & Weather"

_PRIMITIVES = (str, int, float, bool)


def safe_string(value: Any) -> str:
    """Return ``value`` as display text, collapsing missing values to ``N/A``."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, str) and not value.strip():
        return NOT_AVAILABLE
    if not isinstance(value, _PRIMITIVES):
        return NOT_AVAILABLE
    return str(value)


@dataclass(frozen=True)
class BoardCell:
    city: str
    time: str
    temperature: str
    condition: str
    icon: str

    @property
    def temperature_label(self) -> str:
        return f"Temp: {self.temperature}"

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def build_cell(city: City, time: Optional[str], reading: Optional[WeatherReading]) -> BoardCell:
    if reading is None:
        temperature: Any = None
        condition: Any = None
        icon = DEFAULT_ICON
    else:
        temperature = reading.temperature
        condition = reading.condition
        icon = select_icon(temperature) if reading.is_numeric else DEFAULT_ICON
    return BoardCell(
        city=safe_string(city.name),
        time=safe_string(time),
        temperature=safe_string(temperature),
        condition=safe_string(condition),
        icon=icon,
    )


def build_cells(
    cities: Iterable[City],
    times: Mapping[str, str],
    weather: Mapping[str, WeatherReading],
) -> List[BoardCell]:
    """One cell per configured city, in configuration order."""
    return [build_cell(city, times.get(city.name), weather.get(city.name)) for city in cities]


__all__ = ["safe_string", "BoardCell", "build_cell", "build_cells", "PAGE_TITLE", "PAGE_DESCRIPTION", "PAGE_KEYWORDS", "HEADING"]

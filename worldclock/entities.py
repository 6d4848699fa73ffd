from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union


NOT_AVAILABLE = "N/A"
SERVICE_ERROR = "Error"
NETWORK_ERROR = "Network Error"
DEFAULT_CONDITION = "Default"


def is_temperature(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class City:
    """A display name paired with the IANA zone used for its clock."""

    name: str
    timezone: str


@dataclass(frozen=True)
class WeatherReading:
    """Current weather for a single city.

    ``temperature`` holds degrees Fahrenheit rounded to an integer, or one of
    the sentinel strings when the value could not be obtained:
    - ``"Error"`` when the weather service rejected the request
    - ``"Network Error"`` when the request or its decoding failed
    - ``"N/A"`` when the service answered without a temperature
    """

    temperature: Union[int, str]
    condition: str = DEFAULT_CONDITION

    @property
    def is_numeric(self) -> bool:
        return is_temperature(self.temperature)

    def as_dict(self) -> Dict[str, Union[int, str]]:
        return {"temp": self.temperature, "condition": self.condition}


__all__ = [
    "City",
    "WeatherReading",
    "is_temperature",
    "NOT_AVAILABLE",
    "SERVICE_ERROR",
    "NETWORK_ERROR",
    "DEFAULT_CONDITION",
]

"""OpenWeather current weather provider."""
from __future__ import annotations

import math
from typing import Any, Dict, Optional, Union

from .base import ProviderError, ServiceError, WeatherProvider
from ..entities import DEFAULT_CONDITION, NOT_AVAILABLE, WeatherReading


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeather current weather endpoint."""

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5/weather"
    units = "imperial"

    def __init__(self, *, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url

    def current(self, city: str) -> WeatherReading:
        params = {"q": city, "units": self.units, "appid": self.api_key}
        response = self._request("GET", self.base_url, params=params)
        # Errors are reported in the body, so it is decoded whatever the HTTP status.
        data = self._json(response)
        self._log.debug("Weather data for %s: %s", city, data)

        code = data.get("cod")
        if str(code) != "200":
            raise ServiceError(code, data.get("message"))

        return WeatherReading(
            temperature=_temperature(data.get("main")),
            condition=_condition(data.get("weather")),
        )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _temperature(main: Any) -> Union[int, str]:
    if not isinstance(main, dict):
        return NOT_AVAILABLE
    temp = main.get("temp")
    if temp is None:
        return NOT_AVAILABLE
    try:
        return round_half_up(float(temp))
    except (TypeError, ValueError, OverflowError) as exc:
        raise ProviderError(f"invalid temperature {temp!r}") from exc


def _condition(weather: Any) -> str:
    if not isinstance(weather, list) or not weather:
        return DEFAULT_CONDITION
    first: Dict[str, Any] = weather[0] if isinstance(weather[0], dict) else {}
    label = first.get("main")
    if not isinstance(label, str) or not label.strip():
        return DEFAULT_CONDITION
    return label


__all__ = ["OpenWeatherProvider", "round_half_up"]

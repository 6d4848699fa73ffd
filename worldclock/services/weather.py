from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from ..entities import DEFAULT_CONDITION, NETWORK_ERROR, SERVICE_ERROR, City, WeatherReading
from ..providers.base import ProviderError, ServiceError


class WeatherFetcher:
    """Fetch current weather city by city, turning failures into sentinels."""

    def __init__(self, provider: Any, logger: Optional[logging.Logger] = None) -> None:
        self.provider = provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def fetch(self, city: str) -> WeatherReading:
        try:
            return self.provider.current(city)
        except ServiceError as exc:
            self._log.error("API error for %s: %s", city, exc.message)
            return WeatherReading(SERVICE_ERROR, DEFAULT_CONDITION)
        except ProviderError as exc:
            self._log.error("Error fetching weather for %s: %s", city, exc)
            return WeatherReading(NETWORK_ERROR, DEFAULT_CONDITION)

    def fetch_all(self, cities: Iterable[City]) -> Dict[str, WeatherReading]:
        """Fetch every city in order, one request at a time."""
        results: Dict[str, WeatherReading] = {}
        for city in cities:
            results[city.name] = self.fetch(city.name)
        self._log.info("Fetched weather for %d cities", len(results))
        return results


__all__ = ["WeatherFetcher"]

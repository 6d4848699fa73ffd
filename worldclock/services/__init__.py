from .board import WorldClockBoard
from .weather import WeatherFetcher

__all__ = ["WeatherFetcher", "WorldClockBoard"]

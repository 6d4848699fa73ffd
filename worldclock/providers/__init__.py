from .base import ProviderError, RequestConfig, ServiceError, WeatherProvider
from .openweather import OpenWeatherProvider

__all__ = ["OpenWeatherProvider", "ProviderError", "RequestConfig", "ServiceError", "WeatherProvider"]

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests
from requests import Response


class ProviderError(RuntimeError):
    """The provider could not be reached or its answer could not be read."""


class ServiceError(ProviderError):
    """The weather service answered with an application-level error code."""

    def __init__(self, code: Any, message: Optional[str] = None) -> None:
        super().__init__(f"service returned {code}: {message or 'no message'}")
        self.code = code
        self.message = message


@dataclass
class RequestConfig:
    timeout: Optional[float] = None
    headers: Dict[str, str] = field(default_factory=lambda: {"Accept": "application/json"})


class WeatherProvider:
    """Base class for HTTP weather providers sharing one session."""

    name = "provider"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        session = requests.Session()
        session.headers.update(config.headers)
        return session

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            return self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.debug("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.debug("Request failed", exc_info=exc)
            raise ProviderError("request failed") from exc

    def _json(self, response: Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.debug("Failed to decode JSON", exc_info=exc)
            raise ProviderError("invalid json") from exc
        if not isinstance(data, dict):
            raise ProviderError("unexpected payload")
        return data


__all__ = ["WeatherProvider", "ProviderError", "ServiceError", "RequestConfig"]

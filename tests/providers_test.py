from __future__ import annotations

import pytest
import requests

from worldclock.entities import WeatherReading
from worldclock.providers import OpenWeatherProvider, ProviderError, RequestConfig, ServiceError
from worldclock.providers.openweather import round_half_up


BASE_URL = "https://openweather.test/weather"


def make_provider(**kwargs) -> OpenWeatherProvider:
    return OpenWeatherProvider(api_key="secret", base_url=BASE_URL, **kwargs)


def test_openweather_current_normalization(requests_mock):
    requests_mock.get(BASE_URL, json={"cod": 200, "main": {"temp": 72.6}, "weather": [{"main": "Clouds"}]})

    reading = make_provider().current("Paris")

    assert reading == WeatherReading(73, "Clouds")
    assert reading.as_dict() == {"temp": 73, "condition": "Clouds"}


def test_openweather_sends_city_units_and_key(requests_mock):
    requests_mock.get(BASE_URL, json={"cod": 200, "main": {"temp": 50}, "weather": [{"main": "Clear"}]})

    make_provider().current("Tokyo")

    assert requests_mock.call_count == 1
    query = requests_mock.last_request.qs
    assert query["q"] == ["tokyo"]
    assert query["units"] == ["imperial"]
    assert query["appid"] == ["secret"]


def test_openweather_service_error_from_body(requests_mock):
    requests_mock.get(BASE_URL, status_code=404, json={"cod": "404", "message": "city not found"})

    with pytest.raises(ServiceError) as excinfo:
        make_provider().current("Atlantis")

    assert excinfo.value.code == "404"
    assert excinfo.value.message == "city not found"


def test_openweather_numeric_error_code(requests_mock):
    requests_mock.get(BASE_URL, json={"cod": 401, "message": "Invalid API key"})

    with pytest.raises(ServiceError):
        make_provider().current("Paris")


def test_openweather_missing_fields_use_defaults(requests_mock):
    requests_mock.get(BASE_URL, json={"cod": 200, "weather": []})

    reading = make_provider().current("Sydney")

    assert reading == WeatherReading("N/A", "Default")


def test_openweather_transport_failure(requests_mock):
    requests_mock.get(BASE_URL, exc=requests.exceptions.ConnectionError)

    with pytest.raises(ProviderError) as excinfo:
        make_provider().current("Moscow")

    assert not isinstance(excinfo.value, ServiceError)


def test_openweather_timeout(requests_mock):
    requests_mock.get(BASE_URL, exc=requests.exceptions.ReadTimeout)

    with pytest.raises(ProviderError, match="timeout"):
        make_provider(request_config=RequestConfig(timeout=0.5)).current("Moscow")


def test_openweather_invalid_json(requests_mock):
    requests_mock.get(BASE_URL, status_code=502, text="<html>bad gateway</html>")

    with pytest.raises(ProviderError, match="invalid json"):
        make_provider().current("Paris")


def test_openweather_invalid_temperature(requests_mock):
    requests_mock.get(BASE_URL, json={"cod": 200, "main": {"temp": "warm"}})

    with pytest.raises(ProviderError):
        make_provider().current("Paris")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(72.6, 73), (72.5, 73), (72.4, 72), (0.5, 1), (-0.4, 0), (-2.5, -2), (-2.6, -3), (80, 80)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("weather", [[{"main": 5}], [{"main": ""}], [{"main": None}], ["Clouds"], {"main": "Clouds"}])
def test_openweather_condition_must_be_text(requests_mock, weather):
    requests_mock.get(BASE_URL, json={"cod": 200, "main": {"temp": 60}, "weather": weather})

    reading = make_provider().current("Paris")

    assert reading.condition == "Default"

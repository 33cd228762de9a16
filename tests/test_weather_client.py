from __future__ import annotations

import httpx
import pytest

from services.errors import WeatherConfigurationError, WeatherLookupError
from services.weather import WeatherApiClient

BASE_URL = "https://weather.test/v1"


def _client(handler, api_key: str | None = "secret") -> WeatherApiClient:
    return WeatherApiClient(
        api_key=api_key, base_url=BASE_URL, transport=httpx.MockTransport(handler)
    )


def test_current_temperature_sends_key_city_and_disables_air_quality() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"location": {"name": "São Paulo"}, "current": {"temp_c": 25.0}})

    client = _client(handler)
    reading = client.current_temperature("São Paulo")
    client.close()

    assert reading.celsius == 25.0
    assert reading.city == "São Paulo"
    (request,) = requests
    assert request.url.path == "/v1/current.json"
    assert request.url.params["key"] == "secret"
    assert request.url.params["q"] == "São Paulo"
    assert request.url.params["aqi"] == "no"


@pytest.mark.parametrize("api_key", [None, ""])
def test_missing_api_key_fails_before_network(api_key: str | None) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"current": {"temp_c": 1.0}})

    client = _client(handler, api_key=api_key)

    with pytest.raises(WeatherConfigurationError, match="WEATHER_API_KEY"):
        client.current_temperature("São Paulo")

    assert calls == []


@pytest.mark.parametrize("status_code", [201, 400, 401, 500])
def test_non_200_status_fails(status_code: int) -> None:
    client = _client(lambda request: httpx.Response(status_code, json={"current": {"temp_c": 1.0}}))

    with pytest.raises(WeatherLookupError) as excinfo:
        client.current_temperature("Nowhere")

    assert str(excinfo.value) == "failed to fetch weather data"


@pytest.mark.parametrize(
    "body",
    ["not json", '{"current": {}}', '{"location": {"name": "x"}}'],
)
def test_unexpected_body_fails(body: str) -> None:
    client = _client(lambda request: httpx.Response(200, text=body))

    with pytest.raises(WeatherLookupError):
        client.current_temperature("São Paulo")


def test_transport_failure_fails() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client(handler)

    with pytest.raises(WeatherLookupError, match="timed out"):
        client.current_temperature("São Paulo")

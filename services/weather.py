"""Current conditions lookup backed by WeatherAPI."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx
from pydantic import BaseModel, ValidationError

from models.records import TemperatureReading
from services.errors import WeatherConfigurationError, WeatherLookupError, describe_failure

logger = logging.getLogger(__name__)


class WeatherResolver(Protocol):
    def current_temperature(self, city: str) -> TemperatureReading: ...


class CurrentConditions(BaseModel):
    temp_c: float


class CurrentWeather(BaseModel):
    """Subset of the ``current.json`` payload the service relies on."""

    current: CurrentConditions


class WeatherApiClient:
    """Fetch current temperatures through ``GET /current.json``."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.Client(base_url=base_url, transport=transport)

    def close(self) -> None:
        self._client.close()

    def current_temperature(self, city: str) -> TemperatureReading:
        if not self._api_key:
            raise WeatherConfigurationError()

        params = {"key": self._api_key, "q": city, "aqi": "no"}
        try:
            response = self._client.get("/current.json", params=params)
        except httpx.HTTPError as exc:
            raise WeatherLookupError(describe_failure(exc)) from exc

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Weather service rejected the request",
                extra={
                    "city": city,
                    "upstream": "weatherapi",
                    "status_code": response.status_code,
                },
            )
            raise WeatherLookupError("failed to fetch weather data")

        try:
            payload = CurrentWeather.model_validate_json(response.content)
        except ValidationError as exc:
            raise WeatherLookupError(describe_failure(exc)) from exc

        return TemperatureReading(city=city, celsius=payload.current.temp_c)

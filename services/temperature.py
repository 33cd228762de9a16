"""Request pipeline: postal code to current temperature."""

from __future__ import annotations

import logging
import re
import time
from functools import lru_cache
from typing import Optional

from app.schemas import TemperatureResponse
from services.converter import convert_celsius
from services.errors import InvalidZipcodeError, TemperatureLookupError
from services.location import LocationResolver, ViaCepClient
from services.weather import WeatherApiClient, WeatherResolver
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

_ZIPCODE_PATTERN = re.compile(r"[0-9]{8}")


def is_valid_zipcode(candidate: str) -> bool:
    return _ZIPCODE_PATTERN.fullmatch(candidate) is not None


class TemperatureService:
    """Validates a postal code and chains the location and weather lookups."""

    def __init__(self, locations: LocationResolver, weather: WeatherResolver) -> None:
        self.locations = locations
        self.weather = weather

    def lookup(self, zipcode: str) -> TemperatureResponse:
        """Resolve ``zipcode`` to its current temperature.

        Raises ``InvalidZipcodeError`` before any upstream call when the code is
        malformed, ``LocationLookupError`` when the locality cannot be resolved
        and ``WeatherLookupError`` when the temperature cannot be fetched.
        """
        if not is_valid_zipcode(zipcode):
            raise InvalidZipcodeError()

        start_time = time.perf_counter()
        try:
            location = self.locations.resolve(zipcode)
            reading = self.weather.current_temperature(location.locality)
        except TemperatureLookupError as exc:
            logger.warning(
                "Temperature lookup failed",
                extra={
                    "zipcode": zipcode,
                    "status": type(exc).__name__,
                    "reason": str(exc),
                },
            )
            raise

        scales = convert_celsius(reading.celsius)
        logger.info(
            "Temperature lookup completed",
            extra={
                "zipcode": zipcode,
                "city": location.locality,
                "celsius": scales.celsius,
                "elapsed_ms": int((time.perf_counter() - start_time) * 1000),
            },
        )
        return TemperatureResponse(
            temp_c=scales.celsius,
            temp_f=scales.fahrenheit,
            temp_k=scales.kelvin,
        )

    def close(self) -> None:
        """Release upstream connections held by the resolvers."""
        for resolver in (self.locations, self.weather):
            close = getattr(resolver, "close", None)
            if close is not None:
                close()


def build_service(settings: Settings) -> TemperatureService:
    """Wire the service against the real upstream clients."""
    return TemperatureService(
        locations=ViaCepClient(base_url=settings.location_base_url),
        weather=WeatherApiClient(
            api_key=settings.weather_api_key,
            base_url=settings.weather_base_url,
        ),
    )


@lru_cache
def build_default_service(settings: Optional[Settings] = None) -> TemperatureService:
    """Process-wide service built from the environment settings."""
    return build_service(settings or get_settings())

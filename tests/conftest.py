"""Shared fixtures: deterministic stand-ins for the upstream resolvers."""

from __future__ import annotations

from typing import List, Optional

import pytest

from models.records import Location, TemperatureReading
from services.errors import LocationLookupError, WeatherLookupError
from services.temperature import TemperatureService


class FakeLocations:
    def __init__(self, locality: str = "São Paulo", error: Optional[LocationLookupError] = None) -> None:
        self.locality = locality
        self.error = error
        self.calls: List[str] = []

    def resolve(self, zipcode: str) -> Location:
        self.calls.append(zipcode)
        if self.error is not None:
            raise self.error
        return Location(zipcode=zipcode, locality=self.locality)


class FakeWeather:
    def __init__(self, celsius: float = 25.0, error: Optional[WeatherLookupError] = None) -> None:
        self.celsius = celsius
        self.error = error
        self.calls: List[str] = []

    def current_temperature(self, city: str) -> TemperatureReading:
        self.calls.append(city)
        if self.error is not None:
            raise self.error
        return TemperatureReading(city=city, celsius=self.celsius)


@pytest.fixture
def locations() -> FakeLocations:
    return FakeLocations()


@pytest.fixture
def weather() -> FakeWeather:
    return FakeWeather()


@pytest.fixture
def service(locations: FakeLocations, weather: FakeWeather) -> TemperatureService:
    return TemperatureService(locations=locations, weather=weather)

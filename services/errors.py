"""Failure kinds raised by the temperature lookup pipeline."""

from __future__ import annotations


class TemperatureLookupError(Exception):
    """Base class for every failure that ends a lookup."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidZipcodeError(TemperatureLookupError):
    def __init__(self, message: str = "invalid zipcode") -> None:
        super().__init__(message)


class LocationLookupError(TemperatureLookupError):
    """The postal-code service could not be reached or returned unusable data."""


class LocationNotFoundError(LocationLookupError):
    def __init__(self, message: str = "can not find zipcode") -> None:
        super().__init__(message)


class WeatherLookupError(TemperatureLookupError):
    """The weather service could not be reached or returned unusable data."""


class WeatherConfigurationError(WeatherLookupError):
    def __init__(
        self, message: str = "WEATHER_API_KEY environment variable is not set"
    ) -> None:
        super().__init__(message)


def describe_failure(exc: BaseException) -> str:
    """Return a non-empty message for an upstream exception."""
    return str(exc) or exc.__class__.__name__

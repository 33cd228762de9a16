"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """A postal code resolved to its locality."""

    zipcode: str
    locality: str


@dataclass(frozen=True, slots=True)
class TemperatureReading:
    """Current temperature reported for a city."""

    city: str
    celsius: float

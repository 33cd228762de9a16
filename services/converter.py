"""Temperature scale conversion."""

from __future__ import annotations

from dataclasses import dataclass

KELVIN_OFFSET = 273.15


@dataclass(frozen=True)
class TemperatureScales:
    """The same temperature expressed in Celsius, Fahrenheit and Kelvin."""

    celsius: float
    fahrenheit: float
    kelvin: float


def convert_celsius(celsius: float) -> TemperatureScales:
    return TemperatureScales(
        celsius=celsius,
        fahrenheit=celsius * 1.8 + 32,
        kelvin=celsius + KELVIN_OFFSET,
    )

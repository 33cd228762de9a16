"""Unit tests for the temperature conversion."""

from __future__ import annotations

import math

import pytest

from services.converter import convert_celsius


@pytest.mark.parametrize(
    ("celsius", "fahrenheit", "kelvin"),
    [
        (0.0, 32.0, 273.15),
        (100.0, 212.0, 373.15),
        (-40.0, -40.0, 233.15),
        (25.0, 77.0, 298.15),
    ],
)
def test_convert_celsius_known_points(celsius: float, fahrenheit: float, kelvin: float) -> None:
    scales = convert_celsius(celsius)

    assert scales.celsius == celsius
    assert scales.fahrenheit == pytest.approx(fahrenheit)
    assert scales.kelvin == pytest.approx(kelvin)


def test_convert_celsius_passes_non_finite_values_through() -> None:
    scales = convert_celsius(float("inf"))

    assert math.isinf(scales.fahrenheit)
    assert math.isinf(scales.kelvin)
    assert math.isnan(convert_celsius(float("nan")).kelvin)

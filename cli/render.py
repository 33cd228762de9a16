from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

_SCALES = (
    ("Celsius", "temp_C", "°C"),
    ("Fahrenheit", "temp_F", "°F"),
    ("Kelvin", "temp_K", "K"),
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_temperature(zipcode: str, payload: Dict[str, Any]) -> None:
    echo_heading(f"Current temperature for {zipcode}")
    echo_key_values(
        (label, f"{payload.get(field)} {unit}") for label, field, unit in _SCALES
    )

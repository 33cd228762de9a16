"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TemperatureResponse(BaseModel):
    """Current temperature for a postal code in three scales."""

    model_config = ConfigDict(populate_by_name=True)

    # Mixed-case wire names are part of the public contract.
    temp_c: float = Field(..., alias="temp_C", description="Degrees Celsius.")
    temp_f: float = Field(..., alias="temp_F", description="Degrees Fahrenheit.")
    temp_k: float = Field(..., alias="temp_K", description="Kelvin.")


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str

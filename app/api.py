"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas import ErrorResponse, TemperatureResponse
from services.errors import InvalidZipcodeError, LocationLookupError, WeatherLookupError
from services.temperature import TemperatureService, build_default_service

router = APIRouter()

HTTP_422_INVALID_INPUT = 422


def get_temperature_service() -> TemperatureService:
    return build_default_service()


@router.get(
    "/{zipcode:path}",
    response_model=TemperatureResponse,
    summary="Current temperature for a postal code in Celsius, Fahrenheit and Kelvin.",
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        HTTP_422_INVALID_INPUT: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def get_temperature(
    zipcode: str,
    service: TemperatureService = Depends(get_temperature_service),
) -> TemperatureResponse:
    try:
        return service.lookup(zipcode)
    except InvalidZipcodeError as exc:
        raise HTTPException(
            status_code=HTTP_422_INVALID_INPUT,
            detail=str(exc),
        ) from exc
    except LocationLookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except WeatherLookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc

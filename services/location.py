"""Postal code lookup backed by the ViaCEP service."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx
from pydantic import BaseModel, ValidationError

from models.records import Location
from services.errors import LocationLookupError, LocationNotFoundError, describe_failure

logger = logging.getLogger(__name__)


class LocationResolver(Protocol):
    def resolve(self, zipcode: str) -> Location: ...


class ViaCepAddress(BaseModel):
    """Subset of the ViaCEP address payload the service relies on."""

    localidade: Optional[str] = None
    # ViaCEP answers 200 with ``{"erro": true}`` for well-formed codes it does not know.
    erro: bool = False


class ViaCepClient:
    """Resolve postal codes through ``GET /{zipcode}/json/``."""

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, transport=transport)

    def close(self) -> None:
        self._client.close()

    def resolve(self, zipcode: str) -> Location:
        try:
            response = self._client.get(f"/{zipcode}/json/")
        except httpx.HTTPError as exc:
            raise LocationLookupError(describe_failure(exc)) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug(
                "Postal code lookup returned 404",
                extra={"zipcode": zipcode, "upstream": "viacep", "status_code": 404},
            )
            raise LocationNotFoundError()

        try:
            address = ViaCepAddress.model_validate_json(response.content)
        except ValidationError as exc:
            raise LocationLookupError(describe_failure(exc)) from exc

        if address.erro:
            raise LocationNotFoundError()

        return Location(zipcode=zipcode, locality=address.localidade or "")

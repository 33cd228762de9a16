from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router
from app.schemas import ErrorResponse
from logging_config import configure_logging
from services.temperature import build_default_service
from settings import find_env_file, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    service = build_default_service()
    try:
        yield
    finally:
        service.close()
        build_default_service.cache_clear()


async def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="CEP Weather",
        description="Current temperature for a Brazilian postal code in three scales.",
        version="0.1.0",
        lifespan=lifespan,
        # Every path is a postal code candidate.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(router)
    return app


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Serve the application with uvicorn on the configured address."""
    settings = get_settings()
    configure_logging()
    if not find_env_file():
        logger.warning("No .env file found, using the process environment only")
    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info("Starting server on port %s", bind_port)
    uvicorn.run(
        app,
        host=bind_host,
        port=bind_port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


app = create_app()

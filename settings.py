from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv


_WEATHER_API_KEY_ENV = "WEATHER_API_KEY"
_HOST_ENV = "HOST"
_PORT_ENV = "PORT"
_LOG_LEVEL_ENV = "LOG_LEVEL"
_LOCATION_URL_ENV = "VIACEP_BASE_URL"
_WEATHER_URL_ENV = "WEATHER_API_BASE_URL"

DEFAULT_PORT = 8080

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    weather_api_key: Optional[str]
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    location_base_url: str = "https://viacep.com.br/ws"
    weather_base_url: str = "https://api.weatherapi.com/v1"


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_port(default: int) -> int:
    value = os.getenv(_PORT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    level = candidate.upper()
    level = _LOG_LEVEL_ALIASES.get(level, level)
    return level if level in _LOG_LEVELS else default


def find_env_file() -> str:
    """Path of the nearest ``.env`` searching upward from the working directory, or ``""``."""
    return find_dotenv(usecwd=True)


def load_environment() -> bool:
    """Load the working directory's ``.env`` without overriding the process env."""
    path = find_env_file()
    if not path:
        return False
    return load_dotenv(path, override=False)


@lru_cache
def get_settings() -> Settings:
    load_environment()
    return Settings(
        weather_api_key=_read_optional_env(_WEATHER_API_KEY_ENV, None),
        host=_read_str_env(_HOST_ENV, "0.0.0.0"),
        port=_read_port(DEFAULT_PORT),
        log_level=_read_log_level("INFO"),
        location_base_url=_read_str_env(_LOCATION_URL_ENV, "https://viacep.com.br/ws").rstrip("/"),
        weather_base_url=_read_str_env(
            _WEATHER_URL_ENV, "https://api.weatherapi.com/v1"
        ).rstrip("/"),
    )

"""
Application settings.

Values come from ``WEATHERWISE_*`` environment variables; anything missing or
unparseable falls back to the default below.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field

ENV_PREFIX = "WEATHERWISE_"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime configuration for the CLI and flows."""

    model_config = {"frozen": True}

    app_name: str = "WeatherWise"
    app_env: str = "development"
    debug: bool = False
    lat: float = Field(default=52.52, ge=-90, le=90)
    lon: float = Field(default=13.405, ge=-180, le=180)
    openweather_api_key: str = ""
    forecast_days: int = Field(default=7, ge=1, le=16)
    forecast_max_age_minutes: int = Field(default=60, ge=0)


def _env(name: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", "").strip()


def _float(name: str, default: float) -> float:
    raw = _env(name)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _int(name: str, default: int) -> int:
    raw = _env(name)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def load_settings() -> Settings:
    """Build Settings from the current environment (uncached)."""
    defaults = Settings()
    lat = _float("LAT", defaults.lat)
    lon = _float("LON", defaults.lon)
    forecast_days = _int("FORECAST_DAYS", defaults.forecast_days)
    max_age = _int("FORECAST_MAX_AGE_MINUTES", defaults.forecast_max_age_minutes)

    return Settings(
        app_name=_env("APP_NAME") or defaults.app_name,
        app_env=_env("APP_ENV") or defaults.app_env,
        debug=_env("DEBUG").lower() in _TRUTHY,
        lat=lat if -90 <= lat <= 90 else defaults.lat,
        lon=lon if -180 <= lon <= 180 else defaults.lon,
        openweather_api_key=_env("OPENWEATHER_API_KEY"),
        forecast_days=forecast_days if 1 <= forecast_days <= 16 else defaults.forecast_days,
        forecast_max_age_minutes=max_age if max_age >= 0 else defaults.forecast_max_age_minutes,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return load_settings()

"""Hourly and daily forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

from weatherwise.datasources.forecast.client import DAILY_VARS, HOURLY_VARS, OPEN_METEO_API
from weatherwise.services.http import fetch_json


def fetch_forecast(
    lat: float,
    lon: float,
    *,
    forecast_days: int = 7,
) -> dict[str, Any]:
    """
    Fetch the hourly + daily forecast for a location.

    Times come back in the location's local timezone (``timezone=auto``),
    wind speeds in km/h.

    Args:
        lat: Latitude.
        lon: Longitude.
        forecast_days: Number of days to forecast (max 16).

    Returns:
        Raw API response dict with ``hourly`` and ``daily`` keys containing arrays.
    """
    params: dict[str, str | int | float] = {
        "latitude": lat,
        "longitude": lon,
        "timezone": "auto",
        "forecast_days": forecast_days,
        "hourly": ",".join(HOURLY_VARS),
        "daily": ",".join(DAILY_VARS),
    }
    result: dict[str, Any] = fetch_json(OPEN_METEO_API, params=params)
    return result

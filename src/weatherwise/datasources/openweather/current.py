"""Current conditions from the OpenWeatherMap Current Weather API."""

from __future__ import annotations

from typing import Any

from weatherwise.datasources.openweather.client import CURRENT_WEATHER_API, require_api_key
from weatherwise.services.http import fetch_json


def fetch_current_weather(
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = "metric",
) -> dict[str, Any]:
    """
    Fetch current weather for a location.

    Args:
        lat: Latitude.
        lon: Longitude.
        api_key: OpenWeatherMap API key.
        units: ``metric`` gives °C and m/s, which the analysis layer expects.

    Returns:
        Raw API response (``weather``, ``main``, ``wind``, ``clouds``,
        ``visibility``, ``rain``, ``snow``, ``name``).
    """
    params: dict[str, str | float] = {
        "lat": lat,
        "lon": lon,
        "appid": require_api_key(api_key),
        "units": units,
        "lang": "en",
    }
    result: dict[str, Any] = fetch_json(CURRENT_WEATHER_API, params=params)
    return result

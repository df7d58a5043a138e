"""City name to coordinates via the OpenWeatherMap Geocoding API."""

from __future__ import annotations

from typing import Any

from weatherwise.datasources.openweather.client import (
    GEOCODING_API,
    MAX_GEOCODE_RESULTS,
    require_api_key,
)
from weatherwise.schemas import Location
from weatherwise.services.http import fetch_json


class LocationNotFoundError(LookupError):
    """Geocoding returned no match for the query."""


def _label(place: dict[str, Any]) -> str:
    parts = [place.get("name"), place.get("country")]
    return ", ".join(p for p in parts if p)


def geocode_city(city: str, api_key: str, *, limit: int = 1) -> Location:
    """
    Resolve a city name to its best-matching Location.

    Args:
        city: Free-text city name, e.g. ``"Berlin"`` or ``"Paris, FR"``.
        api_key: OpenWeatherMap API key.
        limit: Matches to request (capped at 5); the first one is used.

    Raises:
        ValueError: ``city`` is blank.
        LocationNotFoundError: The provider returned no matches.
    """
    query = city.strip()
    if not query:
        msg = "City name must not be empty"
        raise ValueError(msg)

    params: dict[str, str | int] = {
        "q": query,
        "limit": max(1, min(limit, MAX_GEOCODE_RESULTS)),
        "appid": require_api_key(api_key),
    }
    results = fetch_json(GEOCODING_API, params=params)
    if not isinstance(results, list) or not results:
        msg = f"City not found: {query!r}. Check the spelling."
        raise LocationNotFoundError(msg)

    place = results[0]
    return Location(lat=place["lat"], lon=place["lon"], label=_label(place) or query)

"""Caller-owned forecast memoization.

A forecast is fetched at most once per location and reused for every window
extraction until the location changes (or, optionally, the cache ages out).
The cache is a plain value: callers hold on to it and pass it back in;
nothing here keeps module-level state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

ForecastFetcher = Callable[[float, float], dict[str, Any]]


def location_key(lat: float, lon: float) -> str:
    """Cache key for a location, rounded to 4 decimals (~11 m)."""
    return f"{lat:.4f},{lon:.4f}"


@dataclass(frozen=True)
class ForecastCache:
    """A forecast series together with where and when it was fetched."""

    location_key: str
    series: dict[str, Any]
    fetched_at: datetime

    def matches(self, lat: float, lon: float) -> bool:
        """Whether this cache was fetched for the given location."""
        return self.location_key == location_key(lat, lon)

    def is_fresh(self, now: datetime, max_age: timedelta | None = None) -> bool:
        """Whether the cache is still usable. ``max_age=None`` never expires."""
        if max_age is None:
            return True
        return now - self.fetched_at <= max_age


def ensure_forecast(
    cache: ForecastCache | None,
    lat: float,
    lon: float,
    fetch: ForecastFetcher,
    *,
    now: datetime | None = None,
    max_age: timedelta | None = None,
) -> ForecastCache:
    """
    Return a cache for ``(lat, lon)``, fetching only when needed.

    Args:
        cache: The caller's current cache, or None.
        lat: Latitude.
        lon: Longitude.
        fetch: Called as ``fetch(lat, lon)`` on a miss.
        now: Reference time (defaults to the current UTC time).
        max_age: Optional expiry; None keeps the cache until the location changes.

    Returns:
        ``cache`` itself on a hit, otherwise a new ForecastCache.
    """
    now = now or datetime.now(UTC)
    if cache is not None and cache.matches(lat, lon) and cache.is_fresh(now, max_age):
        return cache
    return ForecastCache(location_key=location_key(lat, lon), series=fetch(lat, lon), fetched_at=now)

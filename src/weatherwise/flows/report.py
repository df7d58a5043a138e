"""
Prefect flow for producing a weather report for one location.

Fetches current conditions (OpenWeatherMap) and the forecast (Open-Meteo),
runs the analysis layer and returns a ``WeatherReport``. The forecast goes
through a caller-owned ``ForecastCache``: pass the cache returned by the
previous run back in and the forecast is only refetched when the location
changes or the cache expires.

Run locally:
    python -m weatherwise.flows.report
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from datetime import UTC, datetime, timedelta, timezone
from typing import Any

from prefect import flow, task

from weatherwise.analysis import (
    DailyPoint,
    HourlyPoint,
    build_weather_context,
    condition_icon,
    extract_daily_window,
    extract_hourly_window,
    get_badges,
    get_impact_score,
    get_recommendation,
    pick_insight,
)
from weatherwise.cache import ForecastCache, ensure_forecast
from weatherwise.config import get_settings
from weatherwise.datasources import forecast, openweather
from weatherwise.datasources.openweather.client import require_api_key
from weatherwise.schemas import Location, WeatherReport


@task(name="fetch-current-weather", retries=2, retry_delay_seconds=5)
def fetch_current(lat: float, lon: float, api_key: str) -> dict[str, Any]:
    """Fetch current conditions from OpenWeatherMap."""
    return openweather.fetch_current_weather(lat, lon, api_key)


@task(name="fetch-forecast", retries=2, retry_delay_seconds=5)
def fetch_forecast_series(lat: float, lon: float, forecast_days: int = 7) -> dict[str, Any]:
    """Fetch the hourly + daily forecast from Open-Meteo."""
    return forecast.fetch_forecast(lat, lon, forecast_days=forecast_days)


def _optional(value: float) -> float | None:
    return None if math.isnan(value) else value


def forecast_local_now(series: dict[str, Any] | None, now: datetime) -> datetime:
    """
    Express ``now`` in the forecast location's local time.

    Open-Meteo (``timezone=auto``) returns naive local timestamps plus
    ``utc_offset_seconds``; "end of today" has to be the location's day, not
    the machine's. Without an offset, ``now`` is returned unchanged.
    """
    offset = (series or {}).get("utc_offset_seconds")
    if isinstance(offset, bool) or not isinstance(offset, int):
        return now
    aware = now if now.tzinfo is not None else now.replace(tzinfo=UTC)
    return aware.astimezone(timezone(timedelta(seconds=offset)))


def assemble_report(
    location: Location,
    current: dict[str, Any],
    forecast_series: dict[str, Any] | None,
    now: datetime,
    rng: Callable[[], float] = random.random,
) -> WeatherReport:
    """Run the analysis layer over fetched payloads. Pure, no I/O."""
    ctx = build_weather_context(current)
    rec = get_recommendation(ctx)

    hourly: list[HourlyPoint] = []
    daily: list[DailyPoint] = []
    if forecast_series:
        hourly = extract_hourly_window(forecast_series, forecast_local_now(forecast_series, now))
        daily = extract_daily_window(forecast_series)

    return WeatherReport(
        location=location,
        generated_at=now,
        condition=ctx.condition,
        raw_condition=ctx.raw_condition,
        icon=condition_icon(ctx.condition),
        summary=rec.summary,
        recommendation=rec.recommendation,
        insight=pick_insight(rec.insight_pool, rng),
        temperature_c=_optional(ctx.temperature_c),
        feels_like_c=_optional(ctx.feels_like_c),
        wind_speed_ms=_optional(ctx.wind_speed_ms),
        impact_score=get_impact_score(ctx),
        badges=get_badges(ctx),
        hourly=hourly,
        daily=daily,
    )


@flow(name="weather-report", log_prints=True, validate_parameters=False)
def build_report(
    location: Location,
    *,
    api_key: str | None = None,
    cache: ForecastCache | None = None,
    include_forecast: bool = True,
    now: datetime | None = None,
) -> tuple[WeatherReport, ForecastCache | None]:
    """
    Build a weather report for ``location``.

    Args:
        location: Where to report on.
        api_key: OpenWeatherMap key; defaults to the configured one.
        cache: Forecast cache from a previous run, if any.
        include_forecast: Skip the forecast (and leave ``cache`` untouched) when False.
        now: Reference time (defaults to the current UTC time).

    Returns:
        The report and the forecast cache to pass into the next run.
    """
    settings = get_settings()
    now = now or datetime.now(UTC)
    key = require_api_key(settings.openweather_api_key if api_key is None else api_key)

    print(f"Fetching current weather for {location.label} ({location.lat}, {location.lon})...")
    current = fetch_current(location.lat, location.lon, key)

    series: dict[str, Any] | None = None
    if include_forecast:

        def _fetch(lat: float, lon: float) -> dict[str, Any]:
            print(f"Fetching {settings.forecast_days}-day forecast for {location.key}...")
            return fetch_forecast_series(lat, lon, settings.forecast_days)

        minutes = settings.forecast_max_age_minutes
        max_age = timedelta(minutes=minutes) if minutes else None
        fresh = ensure_forecast(cache, location.lat, location.lon, _fetch, now=now, max_age=max_age)
        if fresh is cache:
            print(f"Forecast for {location.key} is cached, skipping fetch.")
        cache = fresh
        series = cache.series

    report = assemble_report(location, current, series, now)
    print(f"{report.summary} (impact {report.impact_score}/100)")
    return report, cache


if __name__ == "__main__":
    s = get_settings()
    result, _ = build_report(Location(lat=s.lat, lon=s.lon))
    print(result.model_dump_json(indent=2))

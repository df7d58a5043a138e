"""Bounded views over an Open-Meteo forecast.

The forecast arrives as parallel arrays (one per variable) indexed by time
slot. These helpers zip them into records and cut two windows:

- hourly: from ``now`` through the end of ``now``'s calendar day
- daily: the first seven days

Series are assumed chronological and of equal length. Short or missing
arrays give ``None`` fields instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Any

from weatherwise.reference.thresholds import DAILY_WINDOW_DAYS
from weatherwise.reference.weather_codes import WMO_TAGS, ForecastTag


@dataclass(frozen=True)
class HourlyPoint:
    """One hour of the forecast."""

    time: datetime
    temperature_c: float | None
    precipitation_probability: float | None
    precipitation_mm: float | None
    wind_speed_kmh: float | None
    weather_code: int | None
    tag: ForecastTag


@dataclass(frozen=True)
class DailyPoint:
    """One day of the forecast."""

    day: date
    temperature_min_c: float | None
    temperature_max_c: float | None
    precipitation_probability_max: float | None
    precipitation_sum_mm: float | None
    wind_speed_max_kmh: float | None
    weather_code: int | None
    tag: ForecastTag


def weather_code_to_tag(code: int | None) -> ForecastTag:
    """Map a WMO weather code to a coarse tag; unknown codes are ``mixed``."""
    if code is None:
        return ForecastTag.MIXED
    return WMO_TAGS.get(code, ForecastTag.MIXED)


def _at(values: list[Any], index: int) -> Any:
    return values[index] if index < len(values) else None


def _section(series: dict[str, Any] | None, key: str) -> dict[str, Any]:
    section = (series or {}).get(key)
    return section if isinstance(section, dict) else {}


def end_of_day(now: datetime) -> datetime:
    """Last representable millisecond of ``now``'s calendar day (23:59:59.999)."""
    return now.replace(hour=23, minute=59, second=59, microsecond=999000)


def extract_hourly_window(series: dict[str, Any] | None, now: datetime) -> list[HourlyPoint]:
    """
    Hourly entries from ``now`` through the end of the current day.

    Args:
        series: Open-Meteo forecast response with an ``hourly`` section
            (``time``, ``temperature_2m``, ``precipitation_probability``,
            ``precipitation``, ``wind_speed_10m``, ``weather_code``).
        now: Reference instant. Naive timestamps in the series are read in
            ``now``'s timezone (Open-Meteo returns local time with
            ``timezone=auto``). A naive ``now`` against offset-aware
            timestamps is read as UTC.

    Returns:
        Points in original order. Entries before ``now`` are skipped and the
        scan stops at the first entry past the end of the day.
    """
    hourly = _section(series, "hourly")
    times = hourly.get("time") or []
    temps = hourly.get("temperature_2m") or []
    pops = hourly.get("precipitation_probability") or []
    precip = hourly.get("precipitation") or []
    wind = hourly.get("wind_speed_10m") or []
    codes = hourly.get("weather_code") or []

    end = end_of_day(now)
    points: list[HourlyPoint] = []
    for i, stamp in enumerate(times):
        t = datetime.fromisoformat(stamp)
        if t.tzinfo is None and now.tzinfo is not None:
            t = t.replace(tzinfo=now.tzinfo)
        elif t.tzinfo is not None and now.tzinfo is None:
            # A naive now is read as UTC
            now = now.replace(tzinfo=UTC)
            end = end_of_day(now)
        if t < now:
            continue
        if t > end:
            break
        code = _at(codes, i)
        points.append(
            HourlyPoint(
                time=t,
                temperature_c=_at(temps, i),
                precipitation_probability=_at(pops, i),
                precipitation_mm=_at(precip, i),
                wind_speed_kmh=_at(wind, i),
                weather_code=code,
                tag=weather_code_to_tag(code),
            )
        )
    return points


def extract_daily_window(
    series: dict[str, Any] | None, days: int = DAILY_WINDOW_DAYS
) -> list[DailyPoint]:
    """
    The first ``days`` daily entries (truncated, never padded).

    Args:
        series: Open-Meteo forecast response with a ``daily`` section
            (``time``, ``temperature_2m_min``, ``temperature_2m_max``,
            ``precipitation_probability_max``, ``precipitation_sum``,
            ``wind_speed_10m_max``, ``weather_code``).
        days: Maximum number of days to return.
    """
    daily = _section(series, "daily")
    times = (daily.get("time") or [])[: max(days, 0)]
    tmin = daily.get("temperature_2m_min") or []
    tmax = daily.get("temperature_2m_max") or []
    pop = daily.get("precipitation_probability_max") or []
    total = daily.get("precipitation_sum") or []
    wind = daily.get("wind_speed_10m_max") or []
    codes = daily.get("weather_code") or []

    points: list[DailyPoint] = []
    for i, day in enumerate(times):
        code = _at(codes, i)
        points.append(
            DailyPoint(
                day=date.fromisoformat(day),
                temperature_min_c=_at(tmin, i),
                temperature_max_c=_at(tmax, i),
                precipitation_probability_max=_at(pop, i),
                precipitation_sum_mm=_at(total, i),
                wind_speed_max_kmh=_at(wind, i),
                weather_code=code,
                tag=weather_code_to_tag(code),
            )
        )
    return points

"""Null-safe snapshot of one current-weather observation.

The context builder accepts the OpenWeatherMap current-weather response
as-is. Every field is optional; nothing here raises. Missing temperatures
and wind become ``nan`` so comparisons against thresholds are simply false,
missing precipitation becomes 0.0, and missing cloud cover or visibility
becomes ``None``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from weatherwise.analysis.conditions import Condition, normalize_condition

NAN = math.nan


@dataclass(frozen=True)
class WeatherContext:
    """Normalized weather inputs shared by every scoring rule."""

    condition: Condition
    raw_condition: str = "Unknown"
    description: str = ""
    temperature_c: float = NAN
    feels_like_c: float = NAN
    wind_speed_ms: float = NAN
    cloud_percent: int | None = None
    visibility_m: int | None = None
    rain_mm_1h: float = 0.0
    snow_mm_1h: float = 0.0

    @property
    def has_temperature(self) -> bool:
        """Whether a usable temperature was reported."""
        return not math.isnan(self.temperature_c)

    @property
    def has_wind(self) -> bool:
        """Whether a usable wind speed was reported."""
        return not math.isnan(self.wind_speed_ms)


def _node(obj: Any, key: str) -> dict[str, Any]:
    """Return ``obj[key]`` if it is a dict, else an empty dict."""
    if not isinstance(obj, dict):
        return {}
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def _number(value: Any) -> float | None:
    """Coerce a JSON value to float, rejecting bools, strings and non-finite values."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return float(value)


def _first_weather(payload: dict[str, Any]) -> dict[str, Any]:
    weather = payload.get("weather")
    if isinstance(weather, list) and weather and isinstance(weather[0], dict):
        return weather[0]
    return {}


def build_weather_context(payload: dict[str, Any] | None) -> WeatherContext:
    """
    Build a WeatherContext from a raw current-weather payload.

    Args:
        payload: OpenWeatherMap ``/data/2.5/weather`` response (``units=metric``),
            or any partial/empty version of it.

    Returns:
        A fully populated WeatherContext. A payload with no usable fields
        yields ``Condition.OTHER`` and default numerics.
    """
    data = payload if isinstance(payload, dict) else {}
    weather = _first_weather(data)
    main = _node(data, "main")

    label = weather.get("main")
    label = label if isinstance(label, str) and label else None
    description = weather.get("description")

    temp = _number(main.get("temp"))
    feels_like = _number(main.get("feels_like"))
    wind = _number(_node(data, "wind").get("speed"))
    clouds = _number(_node(data, "clouds").get("all"))
    visibility = _number(data.get("visibility"))
    rain = _number(_node(data, "rain").get("1h"))
    snow = _number(_node(data, "snow").get("1h"))

    return WeatherContext(
        condition=normalize_condition(label),
        raw_condition=label or "Unknown",
        description=description if isinstance(description, str) else "",
        temperature_c=NAN if temp is None else temp,
        feels_like_c=NAN if feels_like is None else feels_like,
        wind_speed_ms=NAN if wind is None else wind,
        cloud_percent=None if clouds is None else min(max(int(clouds), 0), 100),
        visibility_m=None if visibility is None or visibility < 0 else int(visibility),
        rain_mm_1h=max(rain or 0.0, 0.0),
        snow_mm_1h=max(snow or 0.0, 0.0),
    )

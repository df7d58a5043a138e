"""Tests for building a WeatherContext from raw payloads."""

from __future__ import annotations

import math
from typing import Any

import pytest

from weatherwise.analysis.conditions import Condition
from weatherwise.analysis.context import WeatherContext, build_weather_context

FULL_PAYLOAD: dict[str, Any] = {
    "weather": [{"id": 501, "main": "Rain", "description": "moderate rain"}],
    "main": {"temp": 7.4, "feels_like": 4.9, "humidity": 88},
    "wind": {"speed": 5.7, "deg": 240},
    "clouds": {"all": 90},
    "visibility": 8000,
    "rain": {"1h": 1.2},
    "name": "Berlin",
}


class TestBuildWeatherContext:
    """Test field extraction from an OpenWeatherMap response."""

    def test_full_payload(self) -> None:
        ctx = build_weather_context(FULL_PAYLOAD)

        assert ctx.condition == Condition.RAIN
        assert ctx.raw_condition == "Rain"
        assert ctx.description == "moderate rain"
        assert ctx.temperature_c == 7.4
        assert ctx.feels_like_c == 4.9
        assert ctx.wind_speed_ms == 5.7
        assert ctx.cloud_percent == 90
        assert ctx.visibility_m == 8000
        assert ctx.rain_mm_1h == 1.2
        assert ctx.snow_mm_1h == 0.0

    @pytest.mark.parametrize("payload", [None, {}, [], "garbage", 42])
    def test_empty_or_malformed_payload(self, payload: Any) -> None:
        """Test any payload shape yields a default context instead of raising."""
        ctx = build_weather_context(payload)

        assert ctx.condition == Condition.OTHER
        assert ctx.raw_condition == "Unknown"
        assert ctx.description == ""
        assert math.isnan(ctx.temperature_c)
        assert math.isnan(ctx.feels_like_c)
        assert math.isnan(ctx.wind_speed_ms)
        assert ctx.cloud_percent is None
        assert ctx.visibility_m is None
        assert ctx.rain_mm_1h == 0.0
        assert ctx.snow_mm_1h == 0.0

    def test_empty_weather_list(self) -> None:
        ctx = build_weather_context({"weather": [], "main": {"temp": 12}})
        assert ctx.condition == Condition.OTHER
        assert ctx.temperature_c == 12.0

    def test_non_dict_nodes_are_ignored(self) -> None:
        ctx = build_weather_context({"main": "hot", "wind": [1, 2], "rain": 3})
        assert math.isnan(ctx.temperature_c)
        assert math.isnan(ctx.wind_speed_ms)
        assert ctx.rain_mm_1h == 0.0

    def test_non_numeric_values_become_absent(self) -> None:
        ctx = build_weather_context(
            {"main": {"temp": "12"}, "wind": {"speed": True}, "visibility": None}
        )
        assert math.isnan(ctx.temperature_c)
        assert math.isnan(ctx.wind_speed_ms)
        assert ctx.visibility_m is None

    def test_snow_depth(self) -> None:
        ctx = build_weather_context({"weather": [{"main": "Snow"}], "snow": {"1h": 0.4}})
        assert ctx.condition == Condition.SNOW
        assert ctx.snow_mm_1h == 0.4

    def test_negative_visibility_is_absent(self) -> None:
        ctx = build_weather_context({"visibility": -1})
        assert ctx.visibility_m is None

    def test_zero_cloud_cover_is_kept(self) -> None:
        ctx = build_weather_context({"clouds": {"all": 0}})
        assert ctx.cloud_percent == 0


class TestWeatherContext:
    """Test WeatherContext helpers."""

    def test_defaults_are_absent(self) -> None:
        ctx = WeatherContext(condition=Condition.CLEAR)
        assert ctx.has_temperature is False
        assert ctx.has_wind is False

    def test_has_values(self) -> None:
        ctx = WeatherContext(condition=Condition.CLEAR, temperature_c=0.0, wind_speed_ms=0.0)
        assert ctx.has_temperature is True
        assert ctx.has_wind is True

    def test_is_immutable(self) -> None:
        ctx = WeatherContext(condition=Condition.CLEAR)
        with pytest.raises(AttributeError):
            ctx.temperature_c = 20.0  # type: ignore[misc]

"""Tests for the recommendation decision table and insight selection."""

from __future__ import annotations

import math
import random

import pytest

from weatherwise.analysis import recommendation as rec
from weatherwise.analysis.conditions import Condition
from weatherwise.analysis.context import WeatherContext
from weatherwise.analysis.recommendation import get_recommendation, pick_insight


def _ctx(
    condition: Condition, temp: float = 15.0, wind: float = 2.0
) -> WeatherContext:
    return WeatherContext(condition=condition, temperature_c=temp, wind_speed_ms=wind)


class TestDecisionTable:
    """Test each branch and its temperature/wind partitions."""

    @pytest.mark.parametrize(
        ("condition", "temp", "wind", "expected"),
        [
            (Condition.THUNDERSTORM, 20.0, 2.0, "thunderstorm"),
            (Condition.SNOW, -5.0, 2.0, "snow-freezing"),
            (Condition.SNOW, 0.0, 2.0, "snow-freezing"),
            (Condition.SNOW, 0.5, 2.0, "snow-sleet"),
            (Condition.RAIN, 3.0, 2.0, "rain-cold"),
            (Condition.RAIN, 6.0, 2.0, "rain-cold"),
            (Condition.RAIN, 6.1, 2.0, "rain"),
            (Condition.RAIN, 21.9, 2.0, "rain"),
            (Condition.RAIN, 22.0, 2.0, "rain-warm"),
            (Condition.CLOUDS, 10.0, 10.0, "windy-cold"),
            (Condition.CLOUDS, 10.5, 10.0, "windy"),
            (Condition.CLEAR, 28.0, 2.0, "clear-hot"),
            (Condition.CLEAR, 5.0, 2.0, "clear-cold"),
            (Condition.CLEAR, 5.1, 2.0, "clear-pleasant"),
            (Condition.CLEAR, 27.9, 2.0, "clear-pleasant"),
            (Condition.CLOUDS, 8.0, 2.0, "clouds-cool"),
            (Condition.CLOUDS, 8.1, 2.0, "clouds-mild"),
            (Condition.OTHER, 15.0, 5.0, "changeable"),
        ],
    )
    def test_branch(self, condition: Condition, temp: float, wind: float, expected: str) -> None:
        assert get_recommendation(_ctx(condition, temp, wind)).key == expected

    def test_thunderstorm_beats_wind(self) -> None:
        """Test a storm is never masked by the wind branch."""
        result = get_recommendation(_ctx(Condition.THUNDERSTORM, 5.0, 25.0))
        assert result is rec.THUNDERSTORM

    @pytest.mark.parametrize("condition", [Condition.SNOW, Condition.RAIN])
    def test_precipitation_beats_wind(self, condition: Condition) -> None:
        result = get_recommendation(_ctx(condition, 3.0, 15.0))
        assert result.key not in {"windy", "windy-cold"}

    @pytest.mark.parametrize("condition", [Condition.CLEAR, Condition.CLOUDS, Condition.OTHER])
    def test_wind_applies_regardless_of_sky(self, condition: Condition) -> None:
        """Test strong wind takes over for every non-precipitation condition."""
        assert get_recommendation(_ctx(condition, 30.0, 12.0)) is rec.WINDY

    def test_wind_threshold_is_inclusive(self) -> None:
        assert get_recommendation(_ctx(Condition.CLEAR, 20.0, 9.99)) is rec.CLEAR_PLEASANT
        assert get_recommendation(_ctx(Condition.CLEAR, 20.0, 10.0)) is rec.WINDY

    def test_missing_temperature_with_snow(self) -> None:
        """Test an unknown temperature falls to the non-freezing branch."""
        ctx = WeatherContext(condition=Condition.SNOW)
        assert get_recommendation(ctx) is rec.SNOW_SLEET

    def test_missing_everything_is_fallback(self) -> None:
        assert get_recommendation(WeatherContext(condition=Condition.OTHER)) is rec.FALLBACK

    def test_missing_wind_never_triggers_wind_branch(self) -> None:
        ctx = WeatherContext(condition=Condition.CLOUDS, temperature_c=15.0, wind_speed_ms=math.nan)
        assert get_recommendation(ctx) is rec.CLOUDS_MILD

    def test_branches_have_three_insights(self) -> None:
        branches = [
            rec.THUNDERSTORM,
            rec.SNOW_FREEZING,
            rec.SNOW_SLEET,
            rec.RAIN_COLD,
            rec.RAIN_WARM,
            rec.RAIN,
            rec.WINDY_COLD,
            rec.WINDY,
            rec.CLEAR_HOT,
            rec.CLEAR_COLD,
            rec.CLEAR_PLEASANT,
            rec.CLOUDS_COOL,
            rec.CLOUDS_MILD,
            rec.FALLBACK,
        ]
        assert len({b.key for b in branches}) == len(branches)
        for branch in branches:
            assert len(branch.insight_pool) == 3
            assert branch.summary
            assert branch.recommendation

    def test_same_context_same_result(self) -> None:
        ctx = _ctx(Condition.RAIN, 10.0)
        assert get_recommendation(ctx) == get_recommendation(ctx)


class TestPickInsight:
    """Test random insight selection."""

    POOL = ("first", "second", "third")

    def test_empty_pool(self) -> None:
        assert pick_insight([]) == ""
        assert pick_insight(()) == ""

    def test_result_is_member(self) -> None:
        for _ in range(100):
            assert pick_insight(self.POOL) in self.POOL

    def test_every_item_is_reachable(self) -> None:
        rng = random.Random(1234)
        seen = {pick_insight(self.POOL, rng.random) for _ in range(1000)}
        assert seen == set(self.POOL)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, "first"), (0.34, "second"), (0.67, "third"), (0.999, "third")],
    )
    def test_injected_rng_is_deterministic(self, value: float, expected: str) -> None:
        assert pick_insight(self.POOL, lambda: value) == expected

    def test_rng_out_of_range_is_clamped(self) -> None:
        assert pick_insight(self.POOL, lambda: 1.0) == "third"
        assert pick_insight(self.POOL, lambda: -0.5) == "first"

"""Impact score and badges: how much the weather gets in the way today."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from weatherwise.analysis.context import WeatherContext
from weatherwise.reference.thresholds import (
    FROST_C,
    HEAT_C,
    HEAVY_RAIN_MM,
    ICE_RISK_C,
    IMPACT_COLD_C,
    IMPACT_HEAT_C,
    IMPACT_VISIBILITY_M,
    IMPACT_WIND_MS,
    POOR_VISIBILITY_M,
    VERY_CLOUDY_PCT,
    WINDY_MS,
)


class Tone(StrEnum):
    """Badge severity."""

    NEUTRAL = "neutral"
    WARN = "warn"
    DANGER = "danger"


@dataclass(frozen=True)
class Badge:
    """Short categorical flag shown next to the score."""

    text: str
    tone: Tone


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to ``[lower, upper]``."""
    return max(lower, min(upper, value))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def get_impact_score(ctx: WeatherContext) -> int:
    """
    Score 0-100: the higher, the more disruptive the weather.

    Independent additive terms, each clamped on its own:

    - rain:       ``clamp(mm * 12, 10, 45)`` when any rain fell
    - snow:       ``clamp(mm * 10, 10, 40)`` when any snow fell
    - wind:       ``clamp((speed - 6) * 4, 0, 25)`` above 6 m/s
    - heat:       ``clamp((temp - 27) * 4, 4, 25)`` at 28 °C and up
    - cold:       ``clamp((3 - temp) * 5, 5, 30)`` at 2 °C and below
    - visibility: ``clamp((2000 - m) / 80, 5, 25)`` between 0 and 2000 m

    Missing values contribute nothing. The sum is rounded half-up and
    clamped to ``[0, 100]``.
    """
    score = 0.0
    t = ctx.temperature_c
    w = ctx.wind_speed_ms

    if ctx.rain_mm_1h > 0:
        score += clamp(ctx.rain_mm_1h * 12, 10, 45)
    if ctx.snow_mm_1h > 0:
        score += clamp(ctx.snow_mm_1h * 10, 10, 40)

    if ctx.has_wind and w > IMPACT_WIND_MS:
        score += clamp((w - IMPACT_WIND_MS) * 4, 0, 25)

    if ctx.has_temperature and t >= IMPACT_HEAT_C:
        score += clamp((t - 27) * 4, 4, 25)
    if ctx.has_temperature and t <= IMPACT_COLD_C:
        score += clamp((3 - t) * 5, 5, 30)

    vis = ctx.visibility_m
    if vis is not None and 0 < vis < IMPACT_VISIBILITY_M:
        score += clamp((IMPACT_VISIBILITY_M - vis) / 80, 5, 25)

    return int(clamp(_round_half_up(score), 0, 100))


def get_badges(ctx: WeatherContext) -> list[Badge]:
    """
    Derive badges in a fixed order.

    Rain and snow each yield at most one badge (the stronger one wins);
    the remaining rules are independent and can all fire together.
    """
    badges: list[Badge] = []
    t = ctx.temperature_c

    if ctx.rain_mm_1h >= HEAVY_RAIN_MM:
        badges.append(Badge("heavy rain", Tone.DANGER))
    elif ctx.rain_mm_1h > 0:
        badges.append(Badge("wet", Tone.WARN))

    if ctx.snow_mm_1h > 0 and t <= ICE_RISK_C:
        badges.append(Badge("ice risk", Tone.DANGER))
    elif ctx.snow_mm_1h > 0:
        badges.append(Badge("snow", Tone.WARN))

    if ctx.visibility_m is not None and ctx.visibility_m < POOR_VISIBILITY_M:
        badges.append(Badge("poor visibility", Tone.WARN))

    if ctx.has_wind and ctx.wind_speed_ms >= WINDY_MS:
        badges.append(Badge("very windy", Tone.WARN))

    if ctx.has_temperature and t >= HEAT_C:
        badges.append(Badge("heat", Tone.WARN))
    if ctx.has_temperature and t <= FROST_C:
        badges.append(Badge("frost", Tone.WARN))

    # Cloud cover is mood, not risk.
    if ctx.cloud_percent is not None and ctx.cloud_percent >= VERY_CLOUDY_PCT:
        badges.append(Badge("very cloudy", Tone.NEUTRAL))

    return badges

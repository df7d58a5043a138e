"""What to wear and do for the current weather.

A priority-ordered decision table: the first matching rule wins.

1. Thunderstorm (safety first)
2. Snow: freezing vs. sleet
3. Rain: cold / warm / standard
4. Strong wind, whatever the condition: cold vs. mild
5. Clear: hot / deceptively cold / pleasant
6. Clouds: cool vs. mild
7. Fallback for everything else

Hazards are checked before milder branches so they are never masked. Every
lower temperature cut is inclusive, so a boundary value resolves to the
colder branch (0 °C with snow is winter gear, not sleet).
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from weatherwise.analysis.conditions import Condition
from weatherwise.analysis.context import WeatherContext
from weatherwise.reference.thresholds import (
    CLEAR_COLD_C,
    CLEAR_HOT_C,
    CLOUDS_COOL_C,
    RAIN_COLD_C,
    RAIN_WARM_C,
    SNOW_FREEZING_C,
    WINDY_COLD_C,
    WINDY_MS,
)


@dataclass(frozen=True)
class RecommendationResult:
    """One branch of the decision table."""

    key: str
    summary: str
    recommendation: str
    insight_pool: tuple[str, str, str]


THUNDERSTORM = RecommendationResult(
    key="thunderstorm",
    summary="⚡ Thunderstorms likely",
    recommendation="Stay indoors and keep away from open ground. Safety comes first!",
    insight_pool=(
        "Plan B wins today, no contest.",
        "Laptop instead of a run is not a bad deal.",
        "Thunder and lightning are no time to experiment.",
    ),
)

SNOW_FREEZING = RecommendationResult(
    key="snow-freezing",
    summary="❄️ Cold and snowy",
    recommendation="Warm winter boots, a hat and a scarf are a must. Watch out for ice!",
    insight_pool=(
        "Full winter mode today.",
        "Non-slip beats stylish, every single day.",
        "Walking slowly is the new fast.",
    ),
)

SNOW_SLEET = RecommendationResult(
    key="snow-sleet",
    summary="🌨️ Snow or sleet",
    recommendation="Bring a waterproof jacket and plan for several warm layers.",
    insight_pool=(
        "Layers are your superpower today.",
        "Gloves always pay off.",
        "It looks nicer out there than it feels.",
    ),
)

RAIN_COLD = RecommendationResult(
    key="rain-cold",
    summary="🌧️ Cool and rainy",
    recommendation="A rain jacket plus a warm layer (hoodie or sweater) is recommended.",
    insight_pool=(
        "Not a hoodie day. A hoodie-plus-rain-jacket day.",
        "Umbrellas are nice, jackets are safer.",
        "Puddle management: activated.",
    ),
)

RAIN_WARM = RecommendationResult(
    key="rain-warm",
    summary="🌦️ Warm and rainy",
    recommendation="A light rain jacket will do. A spare shirt might help.",
    insight_pool=(
        "Today the rain is more of a mood test.",
        "Briefly wet is still wet, unfortunately.",
        "A dry back is worth its weight in gold.",
    ),
)

RAIN = RecommendationResult(
    key="rain",
    summary="🌧️ Rainy",
    recommendation="Don't forget a rain jacket or an umbrella!",
    insight_pool=(
        "Think waterproof today.",
        "An umbrella makes a good sidekick.",
        "It's a little cinematic out there.",
    ),
)

WINDY_COLD = RecommendationResult(
    key="windy-cold",
    summary="💨 Windy and cool",
    recommendation="A windproof jacket and warm clothing make sense today.",
    insight_pool=(
        "The windproof layer wins today.",
        "Hats: totally underrated.",
        "Wind turns cool into cold very quickly.",
    ),
)

WINDY = RecommendationResult(
    key="windy",
    summary="🌬️ Windy",
    recommendation="A light but windproof layer is worth it today.",
    insight_pool=(
        "Hairstyle today: optional.",
        "Wind is the new cardio.",
        "Small extra layer, big effect.",
    ),
)

CLEAR_HOT = RecommendationResult(
    key="clear-hot",
    summary="☀️ Hot and sunny",
    recommendation="Drink plenty, avoid the midday sun and use sunscreen!",
    insight_pool=(
        "Shade is pure strategy today.",
        "Water first, always.",
        "The sun is definitely the boss today.",
    ),
)

CLEAR_COLD = RecommendationResult(
    key="clear-cold",
    summary="☀️ Clear but cold",
    recommendation="Pack a warm jacket. The sunshine is deceptive!",
    insight_pool=(
        "Sunny does not automatically mean warm.",
        "Clear skies, clear choice of jacket.",
        "The base layer counts today.",
    ),
)

CLEAR_PLEASANT = RecommendationResult(
    key="clear-pleasant",
    summary="🌤️ Friendly and dry",
    recommendation="Perfect conditions! A light jacket if you feel like it.",
    insight_pool=(
        "Perfect weather for a walk.",
        "Fresh air is especially worth it today.",
        "Step out for a bit, it clears the head.",
    ),
)

CLOUDS_COOL = RecommendationResult(
    key="clouds-cool",
    summary="☁️ Cool and cloudy",
    recommendation="Plan a warm layer, especially in the morning and evening.",
    insight_pool=(
        "Clouds can look cold, and be cold.",
        "A hoodie fits today pretty well.",
        "Comfort beats outfit drama.",
    ),
)

CLOUDS_MILD = RecommendationResult(
    key="clouds-mild",
    summary="⛅ Cloudy",
    recommendation="Easy going: everyday clothes, optionally a light jacket.",
    insight_pool=(
        "Today is a solid day.",
        "Weather: unexcited. You too.",
        "Just get on with it.",
    ),
)

FALLBACK = RecommendationResult(
    key="changeable",
    summary="🌫️ Changeable",
    recommendation="Stay practical: wear layers and plan flexibly.",
    insight_pool=(
        "Flexibility is a real virtue today.",
        "A plan with some slack is a good plan.",
        "Layers are your best friend.",
    ),
)


def get_recommendation(ctx: WeatherContext) -> RecommendationResult:
    """Pick the first matching branch of the decision table for ``ctx``."""
    t = ctx.temperature_c
    w = ctx.wind_speed_ms

    match ctx.condition:
        case Condition.THUNDERSTORM:
            return THUNDERSTORM
        case Condition.SNOW:
            return SNOW_FREEZING if t <= SNOW_FREEZING_C else SNOW_SLEET
        case Condition.RAIN:
            if t <= RAIN_COLD_C:
                return RAIN_COLD
            if t >= RAIN_WARM_C:
                return RAIN_WARM
            return RAIN

    # Strong wind applies to every remaining condition, including clear skies.
    if w >= WINDY_MS:
        return WINDY_COLD if t <= WINDY_COLD_C else WINDY

    match ctx.condition:
        case Condition.CLEAR:
            if t >= CLEAR_HOT_C:
                return CLEAR_HOT
            if t <= CLEAR_COLD_C:
                return CLEAR_COLD
            return CLEAR_PLEASANT
        case Condition.CLOUDS:
            return CLOUDS_COOL if t <= CLOUDS_COOL_C else CLOUDS_MILD
        case _:
            return FALLBACK


def pick_insight(
    insight_pool: Sequence[str],
    rng: Callable[[], float] = random.random,
) -> str:
    """
    Pick one insight uniformly at random.

    Args:
        insight_pool: Candidate phrases.
        rng: Zero-argument callable returning a float in ``[0, 1)``.
            Inject a fixed function to make the choice deterministic.

    Returns:
        One member of ``insight_pool``, or ``""`` when it is empty.
    """
    if not insight_pool:
        return ""
    index = min(int(rng() * len(insight_pool)), len(insight_pool) - 1)
    return insight_pool[max(index, 0)]

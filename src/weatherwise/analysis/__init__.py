"""Weather decision logic: raw payloads in, plain value objects out.

Everything here is pure and synchronous. No I/O, no HTTP, no Prefect
decorators, no module-level state.

Data flow::

    current payload -> context -> recommendation -> insight
                               -> impact score
                               -> badges
    forecast payload -> hourly window / daily window

Modules:
  - conditions: label -> Condition (six fixed categories), display icons
  - context: raw current-weather payload -> WeatherContext
  - recommendation: decision table -> RecommendationResult, pick_insight
  - impact: 0-100 impact score and badges
  - forecast_window: hourly (rest of today) and daily (7 days) windows
"""

from weatherwise.analysis.conditions import Condition, condition_icon, normalize_condition
from weatherwise.analysis.context import WeatherContext, build_weather_context
from weatherwise.analysis.forecast_window import (
    DailyPoint,
    HourlyPoint,
    extract_daily_window,
    extract_hourly_window,
    weather_code_to_tag,
)
from weatherwise.analysis.impact import Badge, Tone, get_badges, get_impact_score
from weatherwise.analysis.recommendation import (
    RecommendationResult,
    get_recommendation,
    pick_insight,
)

__all__ = [
    "Badge",
    "Condition",
    "DailyPoint",
    "HourlyPoint",
    "RecommendationResult",
    "Tone",
    "WeatherContext",
    "build_weather_context",
    "condition_icon",
    "extract_daily_window",
    "extract_hourly_window",
    "get_badges",
    "get_impact_score",
    "get_recommendation",
    "normalize_condition",
    "pick_insight",
    "weather_code_to_tag",
]

"""
Boundary models for weatherwise.

Pydantic models for what crosses the process edge: locations coming in from
geocoding/CLI arguments and the assembled report going out as JSON. The core
(``analysis/``) works on frozen dataclasses; these models wrap its outputs
and own serialization.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from weatherwise.analysis.conditions import Condition
from weatherwise.analysis.forecast_window import DailyPoint, HourlyPoint
from weatherwise.analysis.impact import Badge
from weatherwise.cache import location_key


class Location(BaseModel):
    """Geographic point with a display label."""

    model_config = {"str_strip_whitespace": True, "frozen": True}

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    label: str = "Current location"

    @property
    def key(self) -> str:
        """Forecast cache key for this location."""
        return location_key(self.lat, self.lon)


class WeatherReport(BaseModel):
    """Everything one refresh produces, ready to render or dump as JSON."""

    location: Location
    generated_at: datetime
    condition: Condition
    raw_condition: str
    icon: str
    summary: str
    recommendation: str
    insight: str
    temperature_c: float | None = None
    feels_like_c: float | None = None
    wind_speed_ms: float | None = None
    impact_score: int = Field(..., ge=0, le=100)
    badges: list[Badge] = Field(default_factory=list)
    hourly: list[HourlyPoint] = Field(default_factory=list)
    daily: list[DailyPoint] = Field(default_factory=list)

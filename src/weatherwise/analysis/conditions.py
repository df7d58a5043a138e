"""Normalize free-text weather labels into a fixed set of conditions."""

from __future__ import annotations

from enum import StrEnum


class Condition(StrEnum):
    """The six weather categories every recommendation is keyed on."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    OTHER = "other"


# Checked in order; the first substring hit wins. Hazards come first.
_LABEL_RULES: tuple[tuple[tuple[str, ...], Condition], ...] = (
    (("thunder",), Condition.THUNDERSTORM),
    (("drizzle", "rain"), Condition.RAIN),
    (("snow",), Condition.SNOW),
    (("cloud",), Condition.CLOUDS),
    (("clear",), Condition.CLEAR),
)

_ICONS: dict[Condition, str] = {
    Condition.CLEAR: "☀️",
    Condition.CLOUDS: "☁️",
    Condition.RAIN: "🌧️",
    Condition.SNOW: "❄️",
    Condition.THUNDERSTORM: "⚡",
    Condition.OTHER: "🌫️",
}


def normalize_condition(label: str | None) -> Condition:
    """
    Map a provider label (e.g. OpenWeatherMap ``weather[0].main``) to a Condition.

    Matching is a case-insensitive substring test. Anything unrecognised,
    including ``None`` and the empty string, maps to ``Condition.OTHER``.
    """
    text = label.lower() if isinstance(label, str) else ""
    for needles, condition in _LABEL_RULES:
        if any(needle in text for needle in needles):
            return condition
    return Condition.OTHER


def condition_icon(condition: Condition) -> str:
    """Display glyph for a condition."""
    return _ICONS[condition]

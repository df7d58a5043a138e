"""WMO weather interpretation codes, as returned by Open-Meteo.

Codes are grouped into coarse forecast tags (https://open-meteo.com/en/docs).
Snow showers (85/86) are not grouped and fall through to ``mixed``.
"""

from __future__ import annotations

from enum import StrEnum


class ForecastTag(StrEnum):
    """Coarse label for one forecast slot."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    SHOWERS = "showers"
    THUNDERSTORM = "thunderstorm"
    MIXED = "mixed"


_TAG_GROUPS: dict[ForecastTag, tuple[int, ...]] = {
    ForecastTag.CLEAR: (0,),
    ForecastTag.CLOUDY: (1, 2, 3),
    ForecastTag.FOG: (45, 48),
    ForecastTag.DRIZZLE: (51, 53, 55, 56, 57),
    ForecastTag.RAIN: (61, 63, 65, 66, 67),
    ForecastTag.SNOW: (71, 73, 75, 77),
    ForecastTag.SHOWERS: (80, 81, 82),
    ForecastTag.THUNDERSTORM: (95, 96, 99),
}

#: Flat code -> tag lookup built from the groups above.
WMO_TAGS: dict[int, ForecastTag] = {
    code: tag for tag, codes in _TAG_GROUPS.items() for code in codes
}

"""Numeric cut points for recommendations, impact scoring and badges.

Temperatures in °C, wind speeds in m/s, depths in mm over the last hour,
visibility in meters. Every lower cut is inclusive (``<=``).
"""

# Recommendation decision table
SNOW_FREEZING_C: float = 0.0
RAIN_COLD_C: float = 6.0
RAIN_WARM_C: float = 22.0
WINDY_MS: float = 10.0
WINDY_COLD_C: float = 10.0
CLEAR_HOT_C: float = 28.0
CLEAR_COLD_C: float = 5.0
CLOUDS_COOL_C: float = 8.0

# Impact score: a term applies past its threshold
IMPACT_WIND_MS: float = 6.0
IMPACT_HEAT_C: float = 28.0
IMPACT_COLD_C: float = 2.0
IMPACT_VISIBILITY_M: float = 2000.0

# Badges
HEAVY_RAIN_MM: float = 2.0
ICE_RISK_C: float = 1.0
POOR_VISIBILITY_M: int = 1000
HEAT_C: float = 30.0
FROST_C: float = 0.0
VERY_CLOUDY_PCT: int = 85

# Forecast windows
DAILY_WINDOW_DAYS: int = 7

"""Open-Meteo forecast data source.

Fetches the 7-day hourly and daily forecast (free, no API key).

Public API:
  - forecast: fetch_forecast
  - client: API URL, requested variables
"""

from weatherwise.datasources.forecast.client import DAILY_VARS, HOURLY_VARS, OPEN_METEO_API
from weatherwise.datasources.forecast.forecast import fetch_forecast

__all__ = [
    "DAILY_VARS",
    "HOURLY_VARS",
    "OPEN_METEO_API",
    "fetch_forecast",
]

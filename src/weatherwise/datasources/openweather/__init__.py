"""OpenWeatherMap data source.

Current conditions and city geocoding. Both endpoints need an API key
(``WEATHERWISE_OPENWEATHER_API_KEY``).

Public API:
  - current: fetch_current_weather
  - geocode: geocode_city, LocationNotFoundError
  - client: API URLs, MissingApiKeyError
"""

from weatherwise.datasources.openweather.client import (
    CURRENT_WEATHER_API,
    GEOCODING_API,
    MissingApiKeyError,
)
from weatherwise.datasources.openweather.current import fetch_current_weather
from weatherwise.datasources.openweather.geocode import LocationNotFoundError, geocode_city

__all__ = [
    "CURRENT_WEATHER_API",
    "GEOCODING_API",
    "LocationNotFoundError",
    "MissingApiKeyError",
    "fetch_current_weather",
    "geocode_city",
]

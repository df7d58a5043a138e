"""OpenWeatherMap API constants.

API docs:
  - Current weather: https://openweathermap.org/current
  - Geocoding: https://openweathermap.org/api/geocoding-api
"""

CURRENT_WEATHER_API = "https://api.openweathermap.org/data/2.5/weather"
GEOCODING_API = "https://api.openweathermap.org/geo/1.0/direct"

# The geocoding endpoint is asked for at most this many matches
MAX_GEOCODE_RESULTS = 5


class MissingApiKeyError(ValueError):
    """No OpenWeatherMap API key was configured."""


def require_api_key(api_key: str) -> str:
    """Return the stripped key, or raise if it is blank."""
    key = (api_key or "").strip()
    if not key:
        msg = "OpenWeatherMap API key missing (set WEATHERWISE_OPENWEATHER_API_KEY)"
        raise MissingApiKeyError(msg)
    return key

"""Open-Meteo forecast API constants.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Hourly variables we request (parallel arrays keyed by ``hourly.time``)
HOURLY_VARS = [
    "temperature_2m",
    "precipitation_probability",
    "precipitation",
    "wind_speed_10m",
    "weather_code",
]

# Daily variables we request (parallel arrays keyed by ``daily.time``)
DAILY_VARS = [
    "temperature_2m_min",
    "temperature_2m_max",
    "precipitation_probability_max",
    "precipitation_sum",
    "wind_speed_10m_max",
    "weather_code",
]

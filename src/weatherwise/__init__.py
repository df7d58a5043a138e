"""WeatherWise - what to wear and how disruptive today's weather is.

Architecture::

    analysis/      Pure decision logic (condition, context, recommendation,
                   impact score, badges, forecast windows)
    reference/     Thresholds and weather-code tables
    cache.py       Caller-owned forecast memoization (ForecastCache)
    datasources/   External APIs (OpenWeatherMap current + geocoding, Open-Meteo forecast)
    services/      Shared utilities (HTTP client with retry)
    flows/         Prefect orchestration (fetch -> analyse -> report)
    schemas.py     Boundary models (Location, WeatherReport)
    cli.py         ``weatherwise`` command

Data flow: datasources -> analysis -> schemas.WeatherReport -> cli / JSON

Extension points:
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
"""

__version__ = "0.1.0"

from weatherwise.config import Settings
from weatherwise.schemas import Location, WeatherReport

__all__ = ["Location", "Settings", "WeatherReport", "__version__"]

"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return the provider's JSON untouched; turning it into
domain values is the job of ``analysis/``.

- openweather/  current conditions + city geocoding (OpenWeatherMap, API key)
- forecast/     hourly + daily forecast (Open-Meteo, no key)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.

2. Write fetch functions on top of the shared client::

       from weatherwise.services.http import fetch_json

       def fetch_something(lat, lon) -> dict[str, Any]:
           return fetch_json(API_URL, params={...})

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into ``flows/report.py`` as a ``@task`` and add tests in
   ``tests/test_{name}.py``.
"""

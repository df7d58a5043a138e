"""
Shared service utilities.

- http.py - requests session with retry/backoff, ``fetch_json``, WeatherServiceError
"""

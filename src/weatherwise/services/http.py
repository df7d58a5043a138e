"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 429/502/503/504) with exponential
backoff, plus ``fetch_json`` which turns non-2xx responses into a
``WeatherServiceError`` carrying the provider's error details.

Usage::

    from weatherwise.services.http import fetch_json

    data = fetch_json("https://api.open-meteo.com/v1/forecast", params={...})
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Default retry strategy for the transient errors providers return.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,  # 0s, 2s, 4s, 8s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let fetch_json report the final status
)

DEFAULT_TIMEOUT = 12  # seconds

USER_AGENT = "weatherwise/0.1"


class WeatherServiceError(RuntimeError):
    """A weather or geocoding provider answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, details: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.details = details
        message = f"HTTP {status_code}: {reason}"
        if details:
            message = f"{message} - {details}"
        super().__init__(message)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()


def _error_details(resp: requests.Response) -> str:
    content_type = resp.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            return str(resp.json())
        except ValueError:
            return ""
    return resp.text or ""


def fetch_json(url: str, params: dict[str, Any] | None = None) -> Any:
    """
    GET ``url`` and decode the JSON body.

    Raises:
        WeatherServiceError: The provider answered with a non-2xx status.
    """
    resp = session.get(url, params=params)
    if not resp.ok:
        raise WeatherServiceError(resp.status_code, resp.reason or "", _error_details(resp))
    return resp.json()

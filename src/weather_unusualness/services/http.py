"""
HTTP session shared by the Open-Meteo clients.

Transient upstream failures (429 and 502/503/504) are retried at the
transport level with exponential backoff, and every request gets a default
timeout. An analysis run itself is never retried: once these attempts are
spent the caller sees the ``requests`` exception.

Usage::

    from weather_unusualness.services.http import session

    resp = session.get(OPEN_METEO_API, params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_unusualness import __version__

RETRY_STATUSES = (429, 502, 503, 504)

#: Backoff sleeps 0s, 1s, 2s between attempts.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,
    status_forcelist=RETRY_STATUSES,
    allowed_methods=frozenset({"GET", "HEAD"}),
    raise_on_status=False,  # resp.raise_for_status() reports the final status
)

DEFAULT_TIMEOUT = 30.0  # seconds

USER_AGENT = f"weather-unusualness/{__version__}"


class TimeoutSession(requests.Session):
    """``requests.Session`` that fills in ``timeout`` when a call omits it."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout

    def request(  # type: ignore[override]
        self, method: str, url: str, *args: Any, **kwargs: Any
    ) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, *args, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> TimeoutSession:
    """
    Build a session with the retry adapter mounted for http and https.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout used when a request does not pass one.
    """
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s = TimeoutSession(timeout)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return s


session: TimeoutSession = create_session()

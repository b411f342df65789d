"""httpx wrapper.

Standardizes timeouts, headers and User-Agent for every webhook call, and
gives tests a single seam: pass `transport=httpx.MockTransport(...)`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def merge_headers(extra_headers: dict[str, str] | None = None) -> dict[str, str]:
    """Default JSON headers with `extra_headers` merged over them.

    Header names are case-insensitive, so an extra ``content-type`` replaces
    the default ``Content-Type`` instead of duplicating it.
    """

    headers = dict(JSON_HEADERS)
    if not extra_headers:
        return headers
    for name, value in extra_headers.items():
        for existing in [k for k in headers if k.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value
    return headers


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    The timeout comes from `settings.http_timeout_seconds`; no retries are
    configured.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )

"""HTTP transport factory.

All Horizon and Federation calls go through one shared ``httpx.Client`` so
timeouts, headers and connection pooling are configured in a single place.
"""

from typing import Optional

import httpx

from stellar_horizon.config import Settings, get_settings


def build_client(
    settings: Optional[Settings] = None,
    *,
    extra_headers: Optional[dict[str, str]] = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` with the configured defaults.

    Args:
        settings: Settings to use (defaults to ``get_settings()``)
        extra_headers: Headers added to every request

    Returns:
        A new client; the caller owns it and must close it
    """
    settings = settings or get_settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )

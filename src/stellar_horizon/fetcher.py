"""Typed GET requests against Horizon.

Issues one GET, classifies the HTTP outcome and decodes the body into the
shape chosen by the caller. No retries, no sleeping: every failure is raised
to the caller as a typed exception.

Status mapping:
    - request failure (transport, redirects) -> ConnectionFailedError
    - 2xx, empty body   -> ProtocolError
    - 2xx               -> decoded value (with RateLimit attached)
    - 429               -> RateLimitedError(retry_after)
    - other             -> HttpStatusError(status_code, reason)
"""

import logging
from typing import Optional, TypeVar

import httpx

from stellar_horizon.codec import JsonCodec
from stellar_horizon.errors import (
    ConnectionFailedError,
    HttpStatusError,
    ProtocolError,
    RateLimitedError,
)
from stellar_horizon.responses.base import RateLimit, Response, parse_int_header
from stellar_horizon.responses.page import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRY_AFTER_HEADER = "Retry-After"


class TypedFetcher:
    """Fetches a URL and decodes it into a typed response.

    Args:
        client: Shared HTTP client
        codec: JSON codec; a fresh ``JsonCodec`` when omitted
    """

    def __init__(self, client: httpx.Client, codec: Optional[JsonCodec] = None):
        self.client = client
        self.codec = codec or JsonCodec()

    def get(self, url: str, shape: type[T]) -> T:
        """GET ``url`` and decode the body as ``shape``.

        Args:
            url: Absolute URL to fetch
            shape: Response model or parametrised ``Page[...]``

        Returns:
            Decoded response

        Raises:
            ConnectionFailedError: Transport failure or redirect loop
            ProtocolError: Empty or undecodable success body
            RateLimitedError: HTTP 429
            HttpStatusError: Any other non-success status
        """
        logger.debug(f"GET {url}")
        try:
            response = self.client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Horizon request failed for {url}: {e}")
            raise ConnectionFailedError(url, str(e)) from e

        if response.is_success:
            return self._decode(response, shape)

        if response.status_code == 429:
            retry_after = parse_int_header(response.headers, RETRY_AFTER_HEADER)
            logger.warning(f"Horizon rate limit hit for {url}, retry after {retry_after}s")
            raise RateLimitedError(retry_after)

        logger.debug(f"Horizon returned {response.status_code} for {url}")
        raise HttpStatusError(response.status_code, response.reason_phrase)

    def _decode(self, response: httpx.Response, shape: type[T]) -> T:
        if not response.content:
            raise ProtocolError("Response contains no content")

        result = self.codec.decode(response.content, shape)

        if isinstance(result, Response):
            result.rate_limit = RateLimit.from_headers(response.headers)
        if isinstance(result, Page):
            result.bind(self)
            logger.debug(f"Decoded page of {len(result.records)} records from {response.url}")
        return result

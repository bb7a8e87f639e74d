"""Base response model and rate-limit metadata."""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

RATE_LIMIT_LIMIT_HEADER = "X-Ratelimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-Ratelimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-Ratelimit-Reset"


def parse_int_header(headers: httpx.Headers, name: str) -> int:
    """Read an integer header, defaulting to 0 when absent or malformed."""
    value = headers.get(name)
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        logger.debug(f"Ignoring non-integer {name} header: {value!r}")
        return 0


class RateLimit(BaseModel):
    """Rate-limit state reported by Horizon.

    See https://developers.stellar.org/docs/data/horizon/api-reference/structure/rate-limiting
    """

    limit: int = Field(default=0, description="Maximum requests per window")
    remaining: int = Field(default=0, description="Requests left in the current window")
    reset: int = Field(default=0, description="Seconds until a new window starts")

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "RateLimit":
        """Build from response headers; each missing header yields 0."""
        return cls(
            limit=parse_int_header(headers, RATE_LIMIT_LIMIT_HEADER),
            remaining=parse_int_header(headers, RATE_LIMIT_REMAINING_HEADER),
            reset=parse_int_header(headers, RATE_LIMIT_RESET_HEADER),
        )


class Link(BaseModel):
    """A HAL link."""

    href: str
    templated: bool = False


class Response(BaseModel):
    """Base class for every decoded Horizon document.

    Unknown JSON fields are kept as extra attributes. HAL ``_links`` are
    exposed as ``links``.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    links: dict[str, Link] = Field(default_factory=dict, alias="_links")
    rate_limit: RateLimit = Field(default_factory=RateLimit, exclude=True)

    def link(self, name: str) -> Optional[str]:
        """Get the href of a named link, if present."""
        link = self.links.get(name)
        return link.href if link else None

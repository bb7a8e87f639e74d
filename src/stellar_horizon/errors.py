"""Exceptions raised by the Horizon and Federation clients.

Every failure is raised synchronously from the call that detected it.
Nothing here retries; callers own retry and backoff policy, using
``RateLimitedError.retry_after`` when the server provides it.
"""

from typing import Optional


class HorizonError(Exception):
    """Base class for all client errors."""


class ConfigurationError(HorizonError, ValueError):
    """Raised when a request builder is misused.

    Examples: setting path segments twice, paging an order book, or calling
    a filter the resource does not support.
    """


class ConnectionFailedError(HorizonError):
    """Raised when the transport fails before an HTTP response arrives."""

    def __init__(self, url: str, detail: Optional[str] = None):
        self.url = url
        self.detail = detail
        message = f"Connection to {url} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ProtocolError(HorizonError):
    """Raised when a successful response has no usable body."""


class HttpStatusError(HorizonError):
    """Raised for a non-success HTTP status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}" if message else f"HTTP {status_code}")


class RateLimitedError(HttpStatusError):
    """Raised on HTTP 429 Too Many Requests.

    Attributes:
        retry_after: Seconds to wait before retrying (0 if not advertised)
    """

    def __init__(self, retry_after: int = 0):
        self.retry_after = retry_after
        super().__init__(429, f"Too Many Requests (retry after {retry_after}s)")


class FederationError(HorizonError):
    """Base class for federation failures."""


class MalformedAddressError(FederationError, ValueError):
    """Raised when an address is not of the form ``name*domain``."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Malformed federation address: {address!r}")


class NotFoundError(FederationError):
    """Raised when the federation server does not know the address."""


class FederationServerError(FederationError):
    """Raised when the federation server answers with a non-404 error status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Federation server responded with HTTP {status_code}")


class FederationServerInvalidError(FederationError, ValueError):
    """Raised when a federation server URL is not served over https."""

    def __init__(self, server_url: str):
        self.server_url = server_url
        super().__init__(f"Federation server must use https: {server_url}")


class TrustDocumentInvalidError(FederationError):
    """Raised when stellar.toml is missing, empty or unparseable."""

    def __init__(self, domain: str, detail: Optional[str] = None):
        self.domain = domain
        self.detail = detail
        message = f"stellar.toml for {domain} not found or invalid"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoFederationServerError(FederationError):
    """Raised when stellar.toml has no FEDERATION_SERVER entry."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"stellar.toml for {domain} does not define FEDERATION_SERVER")

"""Federation server discovery and address resolution.

Resolving ``bob*example.com`` takes two hops:

1. Discovery: fetch ``https://example.com/.well-known/stellar.toml`` and read
   its ``FEDERATION_SERVER`` entry.
2. Resolution: ``GET <FEDERATION_SERVER>?type=name&q=bob*example.com``.

A ``FederationServer`` is the result of step 1. It never changes after
construction and can resolve any number of addresses.

See https://developers.stellar.org/docs/learn/encyclopedia/network-configuration/federation
"""

import logging
import tomllib
from typing import Optional

import httpx

from stellar_horizon.codec import JsonCodec
from stellar_horizon.errors import (
    ConnectionFailedError,
    FederationServerError,
    FederationServerInvalidError,
    MalformedAddressError,
    NoFederationServerError,
    NotFoundError,
    ProtocolError,
    TrustDocumentInvalidError,
)
from stellar_horizon.federation.response import FederationResponse
from stellar_horizon.http import build_client

logger = logging.getLogger(__name__)

ADDRESS_SEPARATOR = "*"
STELLAR_TOML_PATH = "/.well-known/stellar.toml"
FEDERATION_SERVER_KEY = "FEDERATION_SERVER"


def split_address(address: str) -> tuple[str, str]:
    """Split ``name*domain`` into its two parts.

    Raises:
        MalformedAddressError: Unless there are exactly two non-empty parts
    """
    parts = address.split(ADDRESS_SEPARATOR) if address else []
    if len(parts) != 2 or not all(parts):
        raise MalformedAddressError(address)
    return parts[0], parts[1]


def stellar_toml_url(domain: str) -> str:
    """Well-known trust document URL for a domain."""
    return f"https://{domain}{STELLAR_TOML_PATH}"


class FederationServer:
    """A federation server bound to the domain it is authoritative for.

    Args:
        server_url: Federation endpoint; must use https
        domain: Domain this server answers for
        client: Shared HTTP client (created and owned here when omitted)
        codec: JSON codec for responses

    Raises:
        FederationServerInvalidError: If ``server_url`` is not an https URL
    """

    def __init__(
        self,
        server_url: str,
        domain: str,
        client: Optional[httpx.Client] = None,
        codec: Optional[JsonCodec] = None,
    ):
        try:
            url = httpx.URL(server_url)
        except httpx.InvalidURL as e:
            raise FederationServerInvalidError(server_url) from e
        if url.scheme != "https" or not url.host:
            raise FederationServerInvalidError(server_url)

        self._server_url = url
        self._domain = domain
        self._owns_client = client is None
        self._client = client or build_client()
        self._codec = codec or JsonCodec()

    def __repr__(self) -> str:
        return f"FederationServer(server_url={str(self._server_url)!r}, domain={self._domain!r})"

    def __enter__(self) -> "FederationServer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def server_url(self) -> str:
        return str(self._server_url)

    @property
    def domain(self) -> str:
        return self._domain

    def close(self) -> None:
        """Close the HTTP client if this server created it."""
        if self._owns_client:
            self._client.close()

    @classmethod
    def create_for_domain(
        cls,
        domain: str,
        client: Optional[httpx.Client] = None,
        codec: Optional[JsonCodec] = None,
    ) -> "FederationServer":
        """Discover the federation server for a domain via its stellar.toml.

        Args:
            domain: Domain to look up (e.g. "stellar.org")
            client: Shared HTTP client
            codec: JSON codec for later resolutions

        Returns:
            FederationServer bound to the advertised URL and ``domain``

        Raises:
            ConnectionFailedError: Transport failure or redirect loop
            TrustDocumentInvalidError: stellar.toml missing, empty or malformed
            NoFederationServerError: stellar.toml has no FEDERATION_SERVER
            FederationServerInvalidError: Advertised URL is not https
        """
        domain = domain.strip().lower() if domain else ""
        if not domain:
            raise ValueError("domain cannot be empty")

        owns_client = client is None
        http_client = client or build_client()
        url = stellar_toml_url(domain)

        try:
            logger.debug(f"GET {url}")
            try:
                response = http_client.get(url)
            except httpx.RequestError as e:
                logger.error(f"Failed to fetch stellar.toml for {domain}: {e}")
                raise ConnectionFailedError(url, str(e)) from e

            if not response.is_success:
                logger.warning(f"stellar.toml for {domain} returned HTTP {response.status_code}")
                raise TrustDocumentInvalidError(domain, f"HTTP {response.status_code}")
            if not response.content:
                raise TrustDocumentInvalidError(domain, "empty document")

            try:
                document = tomllib.loads(response.text)
            except tomllib.TOMLDecodeError as e:
                raise TrustDocumentInvalidError(domain, str(e)) from e

            server_url = document.get(FEDERATION_SERVER_KEY)
            if server_url is None or server_url == "":
                raise NoFederationServerError(domain)
            if not isinstance(server_url, str):
                raise TrustDocumentInvalidError(domain, f"{FEDERATION_SERVER_KEY} is not a string")

            server = cls(server_url, domain, client=http_client, codec=codec)
        except Exception:
            if owns_client:
                http_client.close()
            raise

        server._owns_client = owns_client
        logger.info(f"Federation server for {domain}: {server_url}")
        return server

    def resolve_address(self, address: str) -> FederationResponse:
        """Resolve a ``name*domain`` address.

        Args:
            address: Federation address, e.g. "bob*stellar.org"

        Returns:
            FederationResponse with the account id and optional memo

        Raises:
            MalformedAddressError: Address is not ``name*domain`` (no request is made)
            ConnectionFailedError: Transport failure or redirect loop
            NotFoundError: Server answered 404
            FederationServerError: Server answered any other error status
            ProtocolError: Success status with an empty or undecodable body
        """
        split_address(address)

        logger.debug(f"Resolving {address} via {self.server_url}")
        try:
            response = self._client.get(self._server_url, params={"type": "name", "q": address})
        except httpx.RequestError as e:
            logger.error(f"Federation request for {address} failed: {e}")
            raise ConnectionFailedError(self.server_url, str(e)) from e

        if not response.is_success:
            if response.status_code == 404:
                raise NotFoundError(f"Federation address not found: {address}")
            logger.warning(
                f"Federation server {self.server_url} returned HTTP {response.status_code} for {address}"
            )
            raise FederationServerError(response.status_code)

        if not response.content:
            raise ProtocolError("Response contains no content")

        return self._codec.decode(response.content, FederationResponse)

"""One-shot federation lookup."""

from typing import Optional

import httpx

from stellar_horizon.federation.response import FederationResponse
from stellar_horizon.federation.server import FederationServer, split_address
from stellar_horizon.http import build_client


def resolve(address: str, client: Optional[httpx.Client] = None) -> FederationResponse:
    """Resolve ``name*domain`` without knowing the federation server.

    Discovers the server from the address's domain and queries it. The
    address is validated before any request is made.

    Args:
        address: Federation address, e.g. "bob*stellar.org"
        client: Shared HTTP client (a temporary one is used when omitted)
    """
    _, domain = split_address(address)

    if client is None:
        with build_client() as temp_client:
            return resolve(address, client=temp_client)

    server = FederationServer.create_for_domain(domain, client=client)
    return server.resolve_address(address)

"""Federation protocol: resolve ``name*domain`` addresses to account ids."""

from stellar_horizon.federation.resolver import resolve
from stellar_horizon.federation.response import FederationResponse
from stellar_horizon.federation.server import FederationServer, split_address

__all__ = ["FederationResponse", "FederationServer", "resolve", "split_address"]

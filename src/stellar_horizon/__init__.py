"""Python client for the Stellar Horizon API and the Federation protocol."""

__version__ = "0.1.0"

from stellar_horizon.assets import (
    Asset,
    AssetTypeCreditAlphaNum4,
    AssetTypeCreditAlphaNum12,
    AssetTypeNative,
)
from stellar_horizon.codec import JsonCodec
from stellar_horizon.errors import (
    ConfigurationError,
    ConnectionFailedError,
    FederationError,
    FederationServerError,
    FederationServerInvalidError,
    HorizonError,
    HttpStatusError,
    MalformedAddressError,
    NoFederationServerError,
    NotFoundError,
    ProtocolError,
    RateLimitedError,
    TrustDocumentInvalidError,
)
from stellar_horizon.federation import FederationResponse, FederationServer, resolve
from stellar_horizon.fetcher import TypedFetcher
from stellar_horizon.requests import Order, RequestBuilder, ResourceRequest
from stellar_horizon.responses import Page, RateLimit
from stellar_horizon.server import Server

__all__ = [
    "Asset",
    "AssetTypeCreditAlphaNum12",
    "AssetTypeCreditAlphaNum4",
    "AssetTypeNative",
    "ConfigurationError",
    "ConnectionFailedError",
    "FederationError",
    "FederationResponse",
    "FederationServer",
    "FederationServerError",
    "FederationServerInvalidError",
    "HorizonError",
    "HttpStatusError",
    "JsonCodec",
    "MalformedAddressError",
    "NoFederationServerError",
    "NotFoundError",
    "Order",
    "Page",
    "ProtocolError",
    "RateLimit",
    "RateLimitedError",
    "RequestBuilder",
    "ResourceRequest",
    "Server",
    "TrustDocumentInvalidError",
    "TypedFetcher",
    "__version__",
]

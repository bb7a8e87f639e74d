"""Request builders for Horizon resources."""

from stellar_horizon.requests.builder import Order, RequestBuilder, ResourceRequest
from stellar_horizon.requests.kinds import (
    ACCOUNTS,
    ALL_KINDS,
    EFFECTS,
    LEDGERS,
    OFFERS,
    OPERATIONS,
    ORDER_BOOK,
    PATHS,
    PAYMENTS,
    TRADES,
    TRANSACTIONS,
    ResourceKind,
)

__all__ = [
    "ACCOUNTS",
    "ALL_KINDS",
    "EFFECTS",
    "LEDGERS",
    "OFFERS",
    "OPERATIONS",
    "ORDER_BOOK",
    "Order",
    "PATHS",
    "PAYMENTS",
    "RequestBuilder",
    "ResourceKind",
    "ResourceRequest",
    "TRADES",
    "TRANSACTIONS",
]

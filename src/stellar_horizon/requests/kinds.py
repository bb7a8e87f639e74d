"""Resource kinds exposed by Horizon.

A ``ResourceKind`` describes one collection endpoint: where it lives, what
its records decode into, and which filters make sense for it. The request
builder consults the kind instead of relying on a subclass per resource.
"""

from dataclasses import dataclass
from typing import Any

from stellar_horizon.responses import (
    AccountResponse,
    EffectResponse,
    LedgerResponse,
    OfferResponse,
    OperationResponse,
    OrderBookResponse,
    Page,
    PathResponse,
    TradeResponse,
    TransactionResponse,
)

# Scope filters: nest a collection under a parent resource
SCOPE_ACCOUNT = "accounts"
SCOPE_LEDGER = "ledgers"
SCOPE_TRANSACTION = "transactions"
SCOPE_OPERATION = "operations"

# Query filters
FILTER_BUYING_ASSET = "buying_asset"
FILTER_SELLING_ASSET = "selling_asset"
FILTER_DESTINATION_ACCOUNT = "destination_account"
FILTER_SOURCE_ACCOUNT = "source_account"
FILTER_DESTINATION_AMOUNT = "destination_amount"
FILTER_DESTINATION_ASSET = "destination_asset"


@dataclass(frozen=True)
class ResourceKind:
    """Static description of a Horizon collection endpoint."""

    name: str
    segments: tuple[str, ...]
    record: type
    paged: bool = True
    scopes: frozenset[str] = frozenset()
    filters: frozenset[str] = frozenset()

    @property
    def shape(self) -> Any:
        """Type that ``execute()`` decodes into."""
        return Page[self.record] if self.paged else self.record

    @property
    def resource(self) -> str:
        """Trailing path segment used when the collection is scoped."""
        return self.segments[-1]


ACCOUNTS = ResourceKind(
    name="accounts",
    segments=("accounts",),
    record=AccountResponse,
)

EFFECTS = ResourceKind(
    name="effects",
    segments=("effects",),
    record=EffectResponse,
    scopes=frozenset({SCOPE_ACCOUNT, SCOPE_LEDGER, SCOPE_TRANSACTION, SCOPE_OPERATION}),
)

LEDGERS = ResourceKind(
    name="ledgers",
    segments=("ledgers",),
    record=LedgerResponse,
)

OFFERS = ResourceKind(
    name="offers",
    segments=("offers",),
    record=OfferResponse,
    scopes=frozenset({SCOPE_ACCOUNT}),
)

OPERATIONS = ResourceKind(
    name="operations",
    segments=("operations",),
    record=OperationResponse,
    scopes=frozenset({SCOPE_ACCOUNT, SCOPE_LEDGER, SCOPE_TRANSACTION}),
)

ORDER_BOOK = ResourceKind(
    name="order_book",
    segments=("order_book",),
    record=OrderBookResponse,
    paged=False,
    filters=frozenset({FILTER_BUYING_ASSET, FILTER_SELLING_ASSET}),
)

TRADES = ResourceKind(
    name="trades",
    segments=("order_book", "trades"),
    record=TradeResponse,
    filters=frozenset({FILTER_BUYING_ASSET, FILTER_SELLING_ASSET}),
)

PATHS = ResourceKind(
    name="paths",
    segments=("paths",),
    record=PathResponse,
    filters=frozenset({
        FILTER_DESTINATION_ACCOUNT,
        FILTER_SOURCE_ACCOUNT,
        FILTER_DESTINATION_AMOUNT,
        FILTER_DESTINATION_ASSET,
    }),
)

PAYMENTS = ResourceKind(
    name="payments",
    segments=("payments",),
    record=OperationResponse,
    scopes=frozenset({SCOPE_ACCOUNT, SCOPE_LEDGER, SCOPE_TRANSACTION}),
)

TRANSACTIONS = ResourceKind(
    name="transactions",
    segments=("transactions",),
    record=TransactionResponse,
    scopes=frozenset({SCOPE_ACCOUNT, SCOPE_LEDGER}),
)

ALL_KINDS = (
    ACCOUNTS,
    EFFECTS,
    LEDGERS,
    OFFERS,
    OPERATIONS,
    ORDER_BOOK,
    TRADES,
    PATHS,
    PAYMENTS,
    TRANSACTIONS,
)

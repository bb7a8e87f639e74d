"""Typed Horizon response documents."""

from stellar_horizon.responses.account import AccountResponse, Balance, Flags, Signer, Thresholds
from stellar_horizon.responses.base import Link, RateLimit, Response
from stellar_horizon.responses.ledger import LedgerResponse
from stellar_horizon.responses.operation import EffectResponse, OperationResponse
from stellar_horizon.responses.page import Page
from stellar_horizon.responses.trading import (
    AssetJson,
    OfferResponse,
    OrderBookResponse,
    OrderBookRow,
    PathResponse,
    PriceR,
    TradeResponse,
)
from stellar_horizon.responses.transaction import SubmitTransactionResponse, TransactionResponse

__all__ = [
    "AccountResponse",
    "AssetJson",
    "Balance",
    "EffectResponse",
    "Flags",
    "LedgerResponse",
    "Link",
    "OfferResponse",
    "OperationResponse",
    "OrderBookResponse",
    "OrderBookRow",
    "Page",
    "PathResponse",
    "PriceR",
    "RateLimit",
    "Response",
    "Signer",
    "SubmitTransactionResponse",
    "Thresholds",
    "TradeResponse",
    "TransactionResponse",
]

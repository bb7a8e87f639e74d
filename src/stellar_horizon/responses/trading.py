"""Offers, order books, trades and payment paths."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stellar_horizon.responses.base import Response


class AssetJson(BaseModel):
    """Asset as Horizon renders it inside offers and order books."""

    model_config = ConfigDict(extra="allow")

    asset_type: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class PriceR(BaseModel):
    """Price as a rational number."""

    n: int
    d: int


class OfferResponse(Response):
    """A record from ``/accounts/{id}/offers`` or ``/offers``."""

    id: str
    paging_token: Optional[str] = None
    seller: Optional[str] = None
    selling: Optional[AssetJson] = None
    buying: Optional[AssetJson] = None
    amount: Optional[str] = None
    price: Optional[str] = None
    price_r: Optional[PriceR] = None
    last_modified_ledger: Optional[int] = None


class OrderBookRow(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    amount: str
    price: str
    price_r: Optional[PriceR] = None


class OrderBookResponse(Response):
    """``GET /order_book`` snapshot. Not paged."""

    base: Optional[AssetJson] = None
    counter: Optional[AssetJson] = None
    bids: list[OrderBookRow] = Field(default_factory=list)
    asks: list[OrderBookRow] = Field(default_factory=list)


class TradeResponse(Response):
    """A record from ``/order_book/trades``."""

    id: str
    paging_token: Optional[str] = None
    created_at: Optional[str] = None
    seller: Optional[str] = None
    buyer: Optional[str] = None
    sold_asset_type: Optional[str] = None
    sold_asset_code: Optional[str] = None
    sold_asset_issuer: Optional[str] = None
    sold_amount: Optional[str] = None
    bought_asset_type: Optional[str] = None
    bought_asset_code: Optional[str] = None
    bought_asset_issuer: Optional[str] = None
    bought_amount: Optional[str] = None


class PathResponse(Response):
    """A record from ``/paths``."""

    source_amount: str
    source_asset_type: str
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    destination_amount: str
    destination_asset_type: str
    destination_asset_code: Optional[str] = None
    destination_asset_issuer: Optional[str] = None
    path: list[AssetJson] = Field(default_factory=list)

"""Ledger resource."""

from typing import Optional

from pydantic import Field

from stellar_horizon.responses.base import Response


class LedgerResponse(Response):
    """``GET /ledgers/{sequence}``"""

    id: Optional[str] = None
    paging_token: Optional[str] = None
    hash: str = Field(..., description="Ledger header hash")
    prev_hash: Optional[str] = None
    sequence: int = Field(..., description="Ledger sequence number")
    transaction_count: Optional[int] = None
    successful_transaction_count: Optional[int] = None
    failed_transaction_count: Optional[int] = None
    operation_count: int = 0
    closed_at: Optional[str] = None
    total_coins: Optional[str] = None
    fee_pool: Optional[str] = None
    base_fee: Optional[int] = None
    base_fee_in_stroops: Optional[int] = None
    base_reserve: Optional[str] = None
    base_reserve_in_stroops: Optional[int] = None
    max_tx_set_size: Optional[int] = None
    protocol_version: Optional[int] = None

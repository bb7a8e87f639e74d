"""Transaction resource and submission result."""

from typing import Optional

from pydantic import Field

from stellar_horizon.responses.base import Response


class TransactionResponse(Response):
    """``GET /transactions/{hash}``"""

    id: Optional[str] = None
    paging_token: Optional[str] = None
    hash: str = Field(..., description="Transaction hash (hex)")
    ledger: Optional[int] = Field(None, description="Sequence of the ledger it was included in")
    created_at: Optional[str] = None
    source_account: Optional[str] = None
    source_account_sequence: Optional[str] = None
    fee_paid: Optional[int] = None
    fee_charged: Optional[str] = None
    operation_count: int = 0
    successful: Optional[bool] = None
    memo_type: Optional[str] = None
    memo: Optional[str] = None
    signatures: list[str] = Field(default_factory=list)
    envelope_xdr: Optional[str] = None
    result_xdr: Optional[str] = None
    result_meta_xdr: Optional[str] = None


class SubmitTransactionResponse(Response):
    """Result of ``POST /transactions``.

    XDR fields are passed through undecoded.
    """

    hash: Optional[str] = None
    ledger: Optional[int] = None
    successful: Optional[bool] = None
    envelope_xdr: Optional[str] = None
    result_xdr: Optional[str] = None
    result_meta_xdr: Optional[str] = None
    extras: Optional[dict] = Field(None, description="Error details (result codes) when present")

    @property
    def is_success(self) -> bool:
        """Check if the submission reports an included transaction."""
        if self.successful is not None:
            return self.successful
        return self.ledger is not None

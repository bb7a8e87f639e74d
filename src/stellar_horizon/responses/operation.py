"""Operation, payment and effect records.

Horizon has dozens of operation and effect types. Type-specific attributes
are kept as extra fields rather than modelled one class per type.
"""

from typing import Optional

from pydantic import Field

from stellar_horizon.responses.base import Response


class OperationResponse(Response):
    """A record from ``/operations`` or ``/payments``."""

    id: str
    paging_token: Optional[str] = None
    type: str = Field(..., description="Operation type name, e.g. payment")
    type_i: Optional[int] = Field(None, description="Numeric operation type")
    source_account: Optional[str] = None
    created_at: Optional[str] = None
    transaction_hash: Optional[str] = None
    transaction_successful: Optional[bool] = None


class EffectResponse(Response):
    """A record from ``/effects``."""

    id: str
    paging_token: Optional[str] = None
    account: Optional[str] = None
    type: str = Field(..., description="Effect type name, e.g. account_credited")
    type_i: Optional[int] = None
    created_at: Optional[str] = None

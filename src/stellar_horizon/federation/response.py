"""Federation lookup result."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FederationResponse(BaseModel):
    """Identifiers a federation server returned for an address.

    Nothing here is validated beyond decoding; callers decide how to use
    the account id and memo.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    stellar_address: Optional[str] = Field(None, description="Address that was resolved (name*domain)")
    account_id: str = Field(..., description="Resolved account address (G...)")
    memo_type: Optional[str] = Field(None, description="text, id or hash")
    memo: Optional[str] = Field(None, description="Memo to attach to payments")

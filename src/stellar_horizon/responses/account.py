"""Account resource."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stellar_horizon.responses.base import Response


class Balance(BaseModel):
    """One balance line of an account."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    asset_type: str = Field(..., description="native, credit_alphanum4 or credit_alphanum12")
    balance: str = Field(..., description="Amount as a decimal string")
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    limit: Optional[str] = Field(None, description="Trust line limit (issued assets only)")


class Signer(BaseModel):
    """A signer attached to an account."""

    model_config = ConfigDict(extra="allow")

    key: Optional[str] = None
    public_key: Optional[str] = None
    weight: int = 0
    type: Optional[str] = None


class Thresholds(BaseModel):
    low_threshold: int = 0
    med_threshold: int = 0
    high_threshold: int = 0


class Flags(BaseModel):
    auth_required: bool = False
    auth_revocable: bool = False


class AccountResponse(Response):
    """``GET /accounts/{account_id}``"""

    account_id: str = Field(..., description="Account address (G...)")
    id: Optional[str] = None
    paging_token: Optional[str] = None
    sequence: Optional[str] = Field(None, description="Current sequence number")
    subentry_count: int = 0
    home_domain: Optional[str] = None
    inflation_destination: Optional[str] = None
    thresholds: Optional[Thresholds] = None
    flags: Optional[Flags] = None
    balances: list[Balance] = Field(default_factory=list)
    signers: list[Signer] = Field(default_factory=list)
    data: dict[str, str] = Field(default_factory=dict)

"""Asset descriptors and account identifiers.

These types are consumed read-only by the request builders: they are turned
into query parameters and path segments, never interpreted.

Asset variants:
- native: the network's own currency (lumens)
- credit_alphanum4: issued asset with a 1-4 character code
- credit_alphanum12: issued asset with a 5-12 character code
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class HasAccountId(Protocol):
    """Anything exposing a string account address (e.g. a key pair)."""

    @property
    def account_id(self) -> str:
        ...


AccountLike = Union[str, HasAccountId]


def account_id_of(account: AccountLike) -> str:
    """Get the string address of an account identifier.

    Args:
        account: Account address string or object with ``account_id``

    Returns:
        Account address (G... strkey)

    Raises:
        ValueError: If account is None or empty
    """
    if account is None:
        raise ValueError("account cannot be None")
    account_id = account if isinstance(account, str) else account.account_id
    if not account_id:
        raise ValueError("account id cannot be empty")
    return account_id


class Asset(ABC):
    """Base class for asset descriptors."""

    @property
    @abstractmethod
    def type(self) -> str:
        """Asset type name used in query parameters."""
        pass

    @staticmethod
    def native() -> "AssetTypeNative":
        """Get the native asset descriptor."""
        return AssetTypeNative()

    @staticmethod
    def create_non_native_asset(code: str, issuer: AccountLike) -> "AssetTypeCreditAlphaNum":
        """Create an issued asset, picking the variant from the code length.

        Args:
            code: Asset code (1-12 characters)
            issuer: Issuing account

        Returns:
            AssetTypeCreditAlphaNum4 or AssetTypeCreditAlphaNum12

        Raises:
            ValueError: If the code is empty or longer than 12 characters
        """
        if 1 <= len(code) <= 4:
            return AssetTypeCreditAlphaNum4(code, account_id_of(issuer))
        if 5 <= len(code) <= 12:
            return AssetTypeCreditAlphaNum12(code, account_id_of(issuer))
        raise ValueError(f"Invalid asset code length: {code!r}")


@dataclass(frozen=True)
class AssetTypeNative(Asset):
    """The native asset (XLM)."""

    @property
    def type(self) -> str:
        return "native"


@dataclass(frozen=True)
class AssetTypeCreditAlphaNum(Asset):
    """An issued asset identified by code and issuer."""

    code: str
    issuer: str


@dataclass(frozen=True)
class AssetTypeCreditAlphaNum4(AssetTypeCreditAlphaNum):
    def __post_init__(self):
        if not 1 <= len(self.code) <= 4:
            raise ValueError(f"credit_alphanum4 code must be 1-4 characters: {self.code!r}")

    @property
    def type(self) -> str:
        return "credit_alphanum4"


@dataclass(frozen=True)
class AssetTypeCreditAlphaNum12(AssetTypeCreditAlphaNum):
    def __post_init__(self):
        if not 5 <= len(self.code) <= 12:
            raise ValueError(f"credit_alphanum12 code must be 5-12 characters: {self.code!r}")

    @property
    def type(self) -> str:
        return "credit_alphanum12"


def asset_query_params(prefix: str, asset: Asset) -> list[tuple[str, str]]:
    """Translate an asset into ``{prefix}_asset_*`` query parameters.

    The native asset only emits ``{prefix}_asset_type``; issued assets also
    emit the code and issuer.
    """
    params = [(f"{prefix}_asset_type", asset.type)]
    if isinstance(asset, AssetTypeCreditAlphaNum):
        params.append((f"{prefix}_asset_code", asset.code))
        params.append((f"{prefix}_asset_issuer", asset.issuer))
    return params

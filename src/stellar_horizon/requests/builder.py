"""Fluent request builder for Horizon collections.

Usage:
    page = (
        server.transactions()
        .for_ledger(200000000000)
        .limit(50)
        .order(Order.ASC)
        .execute()
    )

A builder is single use. Path segments start at the resource default and may
be replaced at most once; query parameters accumulate in call order. Calling
``build()`` (directly or through ``execute()``) freezes the builder into a
``ResourceRequest``. Any later mutation raises ``ConfigurationError``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import quote, urlencode

from stellar_horizon.assets import AccountLike, Asset, account_id_of, asset_query_params
from stellar_horizon.errors import ConfigurationError
from stellar_horizon.requests.kinds import (
    FILTER_BUYING_ASSET,
    FILTER_DESTINATION_ACCOUNT,
    FILTER_DESTINATION_AMOUNT,
    FILTER_DESTINATION_ASSET,
    FILTER_SELLING_ASSET,
    FILTER_SOURCE_ACCOUNT,
    SCOPE_ACCOUNT,
    SCOPE_LEDGER,
    SCOPE_OPERATION,
    SCOPE_TRANSACTION,
    ResourceKind,
)

if TYPE_CHECKING:
    from stellar_horizon.fetcher import TypedFetcher

logger = logging.getLogger(__name__)


class Order(str, Enum):
    """Values of the ``order`` query parameter."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ResourceRequest:
    """An immutable, fully configured Horizon request."""

    base_url: str
    segments: tuple[str, ...]
    params: tuple[tuple[str, str], ...] = ()

    @property
    def url(self) -> str:
        """Base URL, escaped path segments and parameters in call order."""
        url = self.base_url.rstrip("/")
        if self.segments:
            url += "/" + "/".join(quote(segment, safe="") for segment in self.segments)
        if self.params:
            url += "?" + urlencode(self.params)
        return url


class RequestBuilder:
    """Builds and executes a request for one resource kind.

    Args:
        fetcher: Fetcher used by ``execute()``
        base_url: Horizon server URL
        kind: Resource this builder targets
    """

    def __init__(self, fetcher: "TypedFetcher", base_url: str, kind: ResourceKind):
        self.fetcher = fetcher
        self.base_url = base_url
        self.kind = kind
        self._segments: tuple[str, ...] = kind.segments
        self._segments_set = False
        self._params: list[tuple[str, str]] = []
        self._request: Optional[ResourceRequest] = None

    def __repr__(self) -> str:
        return f"RequestBuilder(kind={self.kind.name!r}, segments={self._segments!r})"

    # -----------------------------------------------------------------
    # Generic configuration
    # -----------------------------------------------------------------

    def set_segments(self, *segments: str) -> "RequestBuilder":
        """Replace the path segments. Allowed once per builder.

        Raises:
            ConfigurationError: If segments were already set or the builder is built
        """
        self._check_mutable()
        if self._segments_set:
            raise ConfigurationError("URL segments have been already added.")
        self._segments_set = True
        self._segments = tuple(str(segment) for segment in segments)
        return self

    def add_query_parameter(self, key: str, value: Any) -> "RequestBuilder":
        """Append a query parameter. Repeated keys are kept."""
        self._check_mutable()
        self._params.append((key, str(value)))
        return self

    def build(self) -> ResourceRequest:
        """Freeze the builder into a ``ResourceRequest``."""
        if self._request is None:
            self._request = ResourceRequest(
                base_url=self.base_url,
                segments=self._segments,
                params=tuple(self._params),
            )
        return self._request

    def build_url(self) -> str:
        """Freeze the builder and return the request URL."""
        return self.build().url

    @property
    def is_built(self) -> bool:
        return self._request is not None

    # -----------------------------------------------------------------
    # Paging
    # -----------------------------------------------------------------

    def cursor(self, token: str) -> "RequestBuilder":
        """Set the opaque paging cursor.

        See https://developers.stellar.org/docs/data/horizon/api-reference/structure/pagination
        """
        self._require_paging("cursor")
        return self.add_query_parameter("cursor", token)

    def limit(self, number: int) -> "RequestBuilder":
        """Set the maximum number of records. The server enforces the range."""
        self._require_paging("limit")
        return self.add_query_parameter("limit", number)

    def order(self, direction: Order) -> "RequestBuilder":
        """Set the sort order."""
        self._require_paging("order")
        return self.add_query_parameter("order", Order(direction).value)

    # -----------------------------------------------------------------
    # Scopes: /{parent}/{id}/{resource}
    # -----------------------------------------------------------------

    def for_account(self, account: AccountLike) -> "RequestBuilder":
        """Scope to ``GET /accounts/{account}/{resource}``."""
        self._require_scope(SCOPE_ACCOUNT)
        return self.set_segments(SCOPE_ACCOUNT, account_id_of(account), self.kind.resource)

    def for_ledger(self, ledger_seq: int) -> "RequestBuilder":
        """Scope to ``GET /ledgers/{ledger_seq}/{resource}``."""
        self._require_scope(SCOPE_LEDGER)
        return self.set_segments(SCOPE_LEDGER, str(int(ledger_seq)), self.kind.resource)

    def for_transaction(self, transaction_id: str) -> "RequestBuilder":
        """Scope to ``GET /transactions/{transaction_id}/{resource}``."""
        self._require_scope(SCOPE_TRANSACTION)
        if not transaction_id:
            raise ConfigurationError("transaction_id cannot be empty")
        return self.set_segments(SCOPE_TRANSACTION, transaction_id, self.kind.resource)

    def for_operation(self, operation_id: int) -> "RequestBuilder":
        """Scope to ``GET /operations/{operation_id}/{resource}``."""
        self._require_scope(SCOPE_OPERATION)
        return self.set_segments(SCOPE_OPERATION, str(int(operation_id)), self.kind.resource)

    # -----------------------------------------------------------------
    # Query filters
    # -----------------------------------------------------------------

    def buying_asset(self, asset: Asset) -> "RequestBuilder":
        self._require_filter(FILTER_BUYING_ASSET)
        return self._add_asset("buying", asset)

    def selling_asset(self, asset: Asset) -> "RequestBuilder":
        self._require_filter(FILTER_SELLING_ASSET)
        return self._add_asset("selling", asset)

    def destination_asset(self, asset: Asset) -> "RequestBuilder":
        self._require_filter(FILTER_DESTINATION_ASSET)
        return self._add_asset("destination", asset)

    def destination_account(self, account: AccountLike) -> "RequestBuilder":
        self._require_filter(FILTER_DESTINATION_ACCOUNT)
        return self.add_query_parameter("destination_account", account_id_of(account))

    def source_account(self, account: AccountLike) -> "RequestBuilder":
        self._require_filter(FILTER_SOURCE_ACCOUNT)
        return self.add_query_parameter("source_account", account_id_of(account))

    def destination_amount(self, amount: str) -> "RequestBuilder":
        self._require_filter(FILTER_DESTINATION_AMOUNT)
        return self.add_query_parameter("destination_amount", amount)

    # -----------------------------------------------------------------
    # Execution
    # -----------------------------------------------------------------

    def execute(self, url: Optional[str] = None) -> Any:
        """Fetch the collection (or order book snapshot).

        Args:
            url: Explicit URL to fetch instead of the built one, e.g. a
                link taken from an earlier response

        Returns:
            ``Page`` of the kind's records, or the record itself for
            unpaged kinds
        """
        if url is None:
            url = self.build_url()
        return self.fetcher.get(url, self.kind.shape)

    def account(self, account: AccountLike) -> Any:
        """Fetch ``GET /accounts/{account}``."""
        return self._fetch_single("accounts", account_id_of(account))

    def ledger(self, ledger_seq: int) -> Any:
        """Fetch ``GET /ledgers/{ledger_seq}``."""
        return self._fetch_single("ledgers", str(int(ledger_seq)))

    def transaction(self, transaction_id: str) -> Any:
        """Fetch ``GET /transactions/{transaction_id}``."""
        return self._fetch_single("transactions", transaction_id)

    def operation(self, operation_id: int) -> Any:
        """Fetch ``GET /operations/{operation_id}``."""
        return self._fetch_single("operations", str(int(operation_id)))

    # -----------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------

    def _fetch_single(self, kind_name: str, resource_id: str) -> Any:
        if self.kind.name != kind_name:
            raise ConfigurationError(
                f"Single {kind_name} lookup is not available on {self.kind.name} requests"
            )
        self.set_segments(kind_name, resource_id)
        return self.fetcher.get(self.build_url(), self.kind.record)

    def _add_asset(self, prefix: str, asset: Asset) -> "RequestBuilder":
        for key, value in asset_query_params(prefix, asset):
            self.add_query_parameter(key, value)
        return self

    def _check_mutable(self) -> None:
        if self._request is not None:
            raise ConfigurationError("Request has already been built and cannot be modified.")

    def _require_paging(self, operation: str) -> None:
        if not self.kind.paged:
            raise ConfigurationError(f"{self.kind.name} requests do not support {operation}")

    def _require_scope(self, scope: str) -> None:
        if scope not in self.kind.scopes:
            raise ConfigurationError(
                f"{self.kind.name} requests cannot be scoped to {scope}"
            )

    def _require_filter(self, name: str) -> None:
        if name not in self.kind.filters:
            raise ConfigurationError(f"{self.kind.name} requests do not support {name}")

"""Horizon server facade.

Hands out request builders bound to one shared HTTP client and submits
transactions.

Submission deliberately maps errors more coarsely than ``TypedFetcher``:
every non-success status, 429 included, becomes a plain ``HttpStatusError``
and Horizon's problem body is not decoded.
"""

import logging
from typing import Optional

import httpx

from stellar_horizon.codec import JsonCodec
from stellar_horizon.config import get_settings
from stellar_horizon.errors import ConnectionFailedError, HttpStatusError, ProtocolError
from stellar_horizon.fetcher import TypedFetcher
from stellar_horizon.http import build_client
from stellar_horizon.requests import (
    ACCOUNTS,
    EFFECTS,
    LEDGERS,
    OFFERS,
    OPERATIONS,
    ORDER_BOOK,
    PATHS,
    PAYMENTS,
    TRADES,
    TRANSACTIONS,
    RequestBuilder,
    ResourceKind,
    ResourceRequest,
)
from stellar_horizon.responses import RateLimit, SubmitTransactionResponse
from stellar_horizon.transaction import TransactionEnvelope

logger = logging.getLogger(__name__)


class Server:
    """Connection to a Horizon server.

    Args:
        server_url: Horizon base URL (defaults to ``Settings.horizon_url``)
        client: HTTP client to use; when omitted one is created and owned
            by this server
        codec: JSON codec passed to the fetcher
    """

    def __init__(
        self,
        server_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        codec: Optional[JsonCodec] = None,
    ):
        self.server_url = (server_url or get_settings().horizon_url).rstrip("/")
        self._owns_client = client is None
        self.client = client or build_client()
        self.fetcher = TypedFetcher(self.client, codec)

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this server created it."""
        if self._owns_client:
            self.client.close()

    def _builder(self, kind: ResourceKind) -> RequestBuilder:
        return RequestBuilder(self.fetcher, self.server_url, kind)

    def accounts(self) -> RequestBuilder:
        return self._builder(ACCOUNTS)

    def effects(self) -> RequestBuilder:
        return self._builder(EFFECTS)

    def ledgers(self) -> RequestBuilder:
        return self._builder(LEDGERS)

    def offers(self) -> RequestBuilder:
        return self._builder(OFFERS)

    def operations(self) -> RequestBuilder:
        return self._builder(OPERATIONS)

    def order_book(self) -> RequestBuilder:
        return self._builder(ORDER_BOOK)

    def trades(self) -> RequestBuilder:
        return self._builder(TRADES)

    def paths(self) -> RequestBuilder:
        return self._builder(PATHS)

    def payments(self) -> RequestBuilder:
        return self._builder(PAYMENTS)

    def transactions(self) -> RequestBuilder:
        return self._builder(TRANSACTIONS)

    def submit_transaction(self, transaction: TransactionEnvelope) -> SubmitTransactionResponse:
        """Submit a signed transaction to the network.

        Sends ``POST /transactions`` with the envelope in form field ``tx``.

        Args:
            transaction: Object exposing ``to_envelope_xdr_base64()``

        Returns:
            Decoded submission result

        Raises:
            ConnectionFailedError: Transport failure or redirect loop
            ProtocolError: Success status with an empty or undecodable body
            HttpStatusError: Any non-success status
        """
        url = ResourceRequest(self.server_url, ("transactions",)).url
        envelope = transaction.to_envelope_xdr_base64()

        logger.debug(f"POST {url} ({len(envelope)} byte envelope)")
        try:
            response = self.client.post(url, data={"tx": envelope})
        except httpx.RequestError as e:
            logger.error(f"Transaction submission to {url} failed: {e}")
            raise ConnectionFailedError(url, str(e)) from e

        if not response.is_success:
            logger.warning(f"Transaction submission rejected: HTTP {response.status_code}")
            raise HttpStatusError(response.status_code, response.reason_phrase)

        if not response.content:
            raise ProtocolError("Response contains no content")

        result = self.fetcher.codec.decode(response.content, SubmitTransactionResponse)
        result.rate_limit = RateLimit.from_headers(response.headers)
        logger.info(f"Transaction submitted: hash={result.hash} ledger={result.ledger}")
        return result

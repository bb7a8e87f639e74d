"""Tests for the typed fetcher and paged responses."""

import httpx
import pytest

from stellar_horizon.codec import JsonCodec
from stellar_horizon.errors import (
    ConfigurationError,
    ConnectionFailedError,
    HttpStatusError,
    ProtocolError,
    RateLimitedError,
)
from stellar_horizon.fetcher import TypedFetcher
from stellar_horizon.responses import LedgerResponse, Page, TransactionResponse

from conftest import HORIZON_URL, page_document, transaction_record

LEDGER_URL = f"{HORIZON_URL}/ledgers/7"
LEDGER = {
    "_links": {"self": {"href": LEDGER_URL}},
    "id": "abc",
    "paging_token": "30064771072",
    "hash": "abc",
    "sequence": 7,
    "operation_count": 3,
    "base_fee_in_stroops": 100,
    "closed_at": "2024-07-09T08:29:31Z",
}


@pytest.fixture
def fetcher(http_client) -> TypedFetcher:
    return TypedFetcher(http_client)


class TestSuccess:
    """Tests for 2xx responses."""

    def test_decodes_record(self, httpx_mock, fetcher):
        """Test decoding a single record."""
        httpx_mock.add_response(url=LEDGER_URL, json=LEDGER)

        ledger = fetcher.get(LEDGER_URL, LedgerResponse)

        assert isinstance(ledger, LedgerResponse)
        assert ledger.sequence == 7
        assert ledger.hash == "abc"
        assert ledger.link("self") == LEDGER_URL

    def test_unknown_fields_kept(self, httpx_mock, fetcher):
        """Test that fields the model does not declare survive decoding."""
        httpx_mock.add_response(url=LEDGER_URL, json={**LEDGER, "tx_set_operation_count": 9})

        ledger = fetcher.get(LEDGER_URL, LedgerResponse)

        assert ledger.model_extra["tx_set_operation_count"] == 9

    def test_rate_limit_headers(self, httpx_mock, fetcher):
        """Test that rate-limit headers are attached to the result."""
        httpx_mock.add_response(
            url=LEDGER_URL,
            json=LEDGER,
            headers={
                "X-Ratelimit-Limit": "3600",
                "X-Ratelimit-Remaining": "3599",
                "X-Ratelimit-Reset": "42",
            },
        )

        ledger = fetcher.get(LEDGER_URL, LedgerResponse)

        assert ledger.rate_limit.limit == 3600
        assert ledger.rate_limit.remaining == 3599
        assert ledger.rate_limit.reset == 42

    def test_missing_rate_limit_headers_default_to_zero(self, httpx_mock, fetcher):
        """Test that absent or malformed headers yield zeros."""
        httpx_mock.add_response(
            url=LEDGER_URL,
            json=LEDGER,
            headers={"X-Ratelimit-Limit": "lots"},
        )

        ledger = fetcher.get(LEDGER_URL, LedgerResponse)

        assert ledger.rate_limit.limit == 0
        assert ledger.rate_limit.remaining == 0
        assert ledger.rate_limit.reset == 0

    def test_any_2xx_is_success(self, httpx_mock, fetcher):
        """Test that non-200 success codes are decoded too."""
        httpx_mock.add_response(url=LEDGER_URL, status_code=203, json=LEDGER)

        assert fetcher.get(LEDGER_URL, LedgerResponse).sequence == 7

    def test_custom_codec_is_used(self, httpx_mock, http_client):
        """Test that an injected codec decodes the body."""
        httpx_mock.add_response(url=LEDGER_URL, json={**LEDGER, "sequence": "7"})
        fetcher = TypedFetcher(http_client, JsonCodec(strict=True))

        with pytest.raises(ProtocolError):
            fetcher.get(LEDGER_URL, LedgerResponse)


class TestFailures:
    """Tests for error classification."""

    def test_rate_limited_with_retry_after(self, httpx_mock, fetcher):
        """Test 429 with a Retry-After header."""
        httpx_mock.add_response(url=LEDGER_URL, status_code=429, headers={"Retry-After": "5"})

        with pytest.raises(RateLimitedError) as exc_info:
            fetcher.get(LEDGER_URL, LedgerResponse)

        assert exc_info.value.retry_after == 5
        assert exc_info.value.status_code == 429

    def test_rate_limited_without_retry_after(self, httpx_mock, fetcher):
        """Test that a missing Retry-After yields 0."""
        httpx_mock.add_response(url=LEDGER_URL, status_code=429)

        with pytest.raises(RateLimitedError) as exc_info:
            fetcher.get(LEDGER_URL, LedgerResponse)

        assert exc_info.value.retry_after == 0

    def test_server_error(self, httpx_mock, fetcher):
        """Test that other statuses raise HttpStatusError with the reason."""
        httpx_mock.add_response(url=LEDGER_URL, status_code=500)

        with pytest.raises(HttpStatusError) as exc_info:
            fetcher.get(LEDGER_URL, LedgerResponse)

        assert not isinstance(exc_info.value, RateLimitedError)
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Internal Server Error"

    def test_not_found(self, httpx_mock, fetcher):
        httpx_mock.add_response(url=LEDGER_URL, status_code=404, json={"status": 404})

        with pytest.raises(HttpStatusError) as exc_info:
            fetcher.get(LEDGER_URL, LedgerResponse)

        assert exc_info.value.status_code == 404

    def test_empty_body(self, httpx_mock, fetcher):
        """Test that a success status without a body is a protocol error."""
        httpx_mock.add_response(url=LEDGER_URL, content=b"")

        with pytest.raises(ProtocolError, match="no content"):
            fetcher.get(LEDGER_URL, LedgerResponse)

    def test_undecodable_body(self, httpx_mock, fetcher):
        """Test that invalid JSON is a protocol error."""
        httpx_mock.add_response(url=LEDGER_URL, text="<html>oops</html>")

        with pytest.raises(ProtocolError):
            fetcher.get(LEDGER_URL, LedgerResponse)

    def test_missing_required_field(self, httpx_mock, fetcher):
        """Test that a document lacking required fields is a protocol error."""
        httpx_mock.add_response(url=LEDGER_URL, json={"hash": "abc"})

        with pytest.raises(ProtocolError):
            fetcher.get(LEDGER_URL, LedgerResponse)

    def test_connection_failure(self, httpx_mock, fetcher):
        """Test that transport errors become ConnectionFailedError."""
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"), url=LEDGER_URL)

        with pytest.raises(ConnectionFailedError) as exc_info:
            fetcher.get(LEDGER_URL, LedgerResponse)

        assert exc_info.value.url == LEDGER_URL
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_redirect_loop(self, httpx_mock, redirecting_client):
        """Test that a redirect loop becomes ConnectionFailedError."""
        httpx_mock.add_response(
            url=LEDGER_URL, status_code=302, headers={"Location": LEDGER_URL}, is_reusable=True
        )
        fetcher = TypedFetcher(redirecting_client)

        with pytest.raises(ConnectionFailedError) as exc_info:
            fetcher.get(LEDGER_URL, LedgerResponse)

        assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)

    def test_decoding_failure(self, httpx_mock, fetcher):
        """Test that body decoding errors from the client are typed too."""
        httpx_mock.add_exception(httpx.DecodingError("Error -3 while decompressing data"), url=LEDGER_URL)

        with pytest.raises(ConnectionFailedError):
            fetcher.get(LEDGER_URL, LedgerResponse)


class TestPage:
    """Tests for paged collections."""

    PAGE_URL = f"{HORIZON_URL}/transactions?limit=2&order=asc"
    NEXT_URL = f"{HORIZON_URL}/transactions?cursor=30064775169&limit=2&order=asc"
    PREV_URL = f"{HORIZON_URL}/transactions?cursor=30064775168&limit=2&order=desc"

    def test_records_decoded(self, httpx_mock, fetcher):
        """Test that embedded records are decoded in server order."""
        httpx_mock.add_response(
            url=self.PAGE_URL,
            json=page_document([
                transaction_record("aa", ledger=7, paging_token="1"),
                transaction_record("bb", ledger=8, paging_token="2"),
            ]),
        )

        page = fetcher.get(self.PAGE_URL, Page[TransactionResponse])

        assert [r.hash for r in page.records] == ["aa", "bb"]
        assert all(isinstance(r, TransactionResponse) for r in page.records)

    def test_empty_page(self, httpx_mock, fetcher):
        httpx_mock.add_response(url=self.PAGE_URL, json=page_document([]))

        page = fetcher.get(self.PAGE_URL, Page[TransactionResponse])

        assert page.records == []
        assert page.next_page() is None

    def test_next_page(self, httpx_mock, fetcher):
        """Test following the next link with the same record type."""
        httpx_mock.add_response(
            url=self.PAGE_URL,
            json=page_document([transaction_record("aa")], next_href=self.NEXT_URL),
        )
        httpx_mock.add_response(
            url=self.NEXT_URL,
            json=page_document([transaction_record("bb")]),
            headers={"X-Ratelimit-Remaining": "10"},
        )

        page = fetcher.get(self.PAGE_URL, Page[TransactionResponse])
        next_page = page.next_page()

        assert isinstance(next_page, Page)
        assert isinstance(next_page.records[0], TransactionResponse)
        assert next_page.records[0].hash == "bb"
        assert next_page.rate_limit.remaining == 10
        assert next_page.next_page() is None

    def test_prev_page(self, httpx_mock, fetcher):
        httpx_mock.add_response(
            url=self.PAGE_URL,
            json=page_document([transaction_record("bb")], prev_href=self.PREV_URL),
        )
        httpx_mock.add_response(url=self.PREV_URL, json=page_document([transaction_record("aa")]))

        page = fetcher.get(self.PAGE_URL, Page[TransactionResponse])

        assert page.prev_link == self.PREV_URL
        assert page.prev_page().records[0].hash == "aa"

    def test_missing_prev_link(self, httpx_mock, fetcher):
        httpx_mock.add_response(url=self.PAGE_URL, json=page_document([transaction_record()]))

        page = fetcher.get(self.PAGE_URL, Page[TransactionResponse])

        assert page.prev_link is None
        assert page.prev_page() is None

    def test_unbound_page_cannot_follow(self):
        """Test that a page built by hand cannot fetch neighbours."""
        page = Page[TransactionResponse].model_validate(
            page_document([], next_href=self.NEXT_URL)
        )

        with pytest.raises(ConfigurationError):
            page.next_page()

"""Pytest configuration and fixtures."""

import os

import httpx
import pytest

# Set test environment
os.environ["STELLAR_HORIZON_URL"] = "https://horizon-testnet.stellar.org"
os.environ["STELLAR_DEBUG"] = "true"

from stellar_horizon.config import get_settings
from stellar_horizon.http import build_client
from stellar_horizon.server import Server

HORIZON_URL = "https://horizon-testnet.stellar.org"

ACCOUNT_ID = "GBRPYHIL2CI3FNQ4BXLFMNDLFJUNPU2HY3ZMFSHONUCEOASW7QC7OX2H"
EUR_ISSUER = "GAUPA4HERNBDPVO4IUA3MJXBCRRK5W54EVXTDK6IIUTGDQRB6D5W242W"
USD_ISSUER = "GDRRHSJMHXDTQBT4JTCILNGF5AS54FEMTXL7KOLMF6TFTHRK6SSUSUZZ"
TX_HASH = "991534d902063b7715cd74207bef4e7bd7aa2f108f62d3eba837ce6023b2d4f3"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def http_client():
    """Shared HTTP client; pytest-httpx intercepts its transport."""
    with httpx.Client() as client:
        yield client


@pytest.fixture
def redirecting_client():
    """Client configured like production, following redirects."""
    with build_client() as client:
        yield client


@pytest.fixture
def server(http_client) -> Server:
    """Horizon server bound to the test client."""
    return Server(HORIZON_URL, client=http_client)


def transaction_record(hash_: str = TX_HASH, ledger: int = 7, paging_token: str = "30064775168") -> dict:
    """A minimal /transactions record."""
    return {
        "_links": {"self": {"href": f"{HORIZON_URL}/transactions/{hash_}"}},
        "id": hash_,
        "paging_token": paging_token,
        "hash": hash_,
        "ledger": ledger,
        "created_at": "2024-07-09T08:29:31Z",
        "source_account": ACCOUNT_ID,
        "fee_paid": 100,
        "operation_count": 1,
        "successful": True,
        "memo_type": "none",
        "envelope_xdr": "AAAA",
        "result_xdr": "AAAA",
        "result_meta_xdr": "AAAA",
    }


def page_document(records: list, next_href: str = None, prev_href: str = None) -> dict:
    """Wrap records in Horizon's HAL page envelope."""
    links = {"self": {"href": f"{HORIZON_URL}/transactions"}}
    if next_href:
        links["next"] = {"href": next_href}
    if prev_href:
        links["prev"] = {"href": prev_href}
    return {"_links": links, "_embedded": {"records": records}}

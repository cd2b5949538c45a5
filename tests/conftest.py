"""Shared test setup.

Settings are loaded when the package is imported, so the required
AlphaVantage values must be in the environment before any test module
imports it.
"""

import os

os.environ.setdefault("ALPHAVANTAGE_API_KEY", "test-api-key")
os.environ.setdefault("ALPHAVANTAGE_BASE_URL", "https://www.alphavantage.co")
os.environ.setdefault("DEBUG", "True")

import pytest  # noqa: E402

from stock_quote_mcp.core.models import QuoteResponse  # noqa: E402
from stock_quote_mcp.services.stock_quote import StockQuoteService  # noqa: E402

IBM_QUOTE = {
    "Global Quote": {
        "01. symbol": "IBM",
        "02. open": "170.0000",
        "05. price": "171.2300",
        "06. volume": 3412345,
        "07. latest trading day": "2024-05-10",
    }
}


class StubAlphaVantageClient:
    """Records calls instead of reaching AlphaVantage."""

    def __init__(self, payload=None, error=None):
        self.payload = IBM_QUOTE if payload is None else payload
        self.error = error
        self.calls = []

    async def get_global_quote(self, symbol):
        return await self.fetch_quote(symbol, "GLOBAL_QUOTE")

    async def fetch_quote(self, symbol, function_name, extra_params=None):
        self.calls.append({"symbol": symbol, "function": function_name, "extra_params": extra_params})
        if self.error is not None:
            raise self.error
        return QuoteResponse(data=self.payload)


@pytest.fixture
def make_service():
    """Build a StockQuoteService around a stub client."""

    def _make(payload=None, error=None):
        client = StubAlphaVantageClient(payload=payload, error=error)
        return StockQuoteService(client=client), client

    return _make

"""AlphaVantage HTTP client."""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from stock_quote_mcp.core.exceptions import (
    AlphaVantageError,
    InvalidArgumentError,
    NetworkError,
    UpstreamApplicationError,
    UpstreamHttpError,
)
from stock_quote_mcp.core.models import GLOBAL_QUOTE, QuoteResponse
from stock_quote_mcp.core.validation import normalize_symbol
from stock_quote_mcp.utils.config import settings
from stock_quote_mcp.utils.logger import logger


class AlphaVantageClient:
    """Calls the AlphaVantage ``/query`` endpoint and returns its JSON verbatim.

    A shared ``aiohttp.ClientSession`` may be passed in; otherwise a session is
    opened for each call. The API key is sent as a query parameter and never
    logged.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.api_key = api_key or settings.alphavantage_api_key
        self.base_url = (base_url or settings.alphavantage_base_url).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout or settings.alphavantage_timeout)
        self._session = session

    @property
    def query_url(self) -> str:
        return f"{self.base_url}/query"

    async def get_global_quote(self, symbol: str) -> QuoteResponse:
        """Get the latest price and volume for a stock symbol."""
        return await self.fetch_quote(symbol, GLOBAL_QUOTE)

    async def fetch_quote(
        self,
        symbol: str,
        function_name: str,
        extra_params: Optional[Dict[str, str]] = None,
    ) -> QuoteResponse:
        """
        Call an AlphaVantage function for a symbol.

        Args:
            symbol: Stock symbol, trimmed and uppercased before use
            function_name: AlphaVantage function (e.g. 'GLOBAL_QUOTE', 'TIME_SERIES_DAILY')
            extra_params: Additional query parameters; they cannot replace
                function, symbol or apikey

        Raises:
            InvalidArgumentError: symbol or function is empty
            UpstreamHttpError: non-2xx status
            UpstreamApplicationError: error reported inside a 2xx body
            NetworkError: connection failure or timeout
        """
        if not symbol or not symbol.strip():
            raise InvalidArgumentError("Stock symbol cannot be null or empty")
        if not function_name or not function_name.strip():
            raise InvalidArgumentError("Function cannot be null or empty")

        normalized = normalize_symbol(symbol)
        params: Dict[str, str] = dict(extra_params or {})
        params.update({
            "function": function_name,
            "symbol": normalized,
            "apikey": self.api_key,
        })

        logger.info(f"Calling AlphaVantage function {function_name} for symbol: {normalized}")

        try:
            response = await self._get(params)
        except AlphaVantageError:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"Timed out calling AlphaVantage function {function_name} for symbol {normalized}")
            raise NetworkError(
                f"Timed out calling function {function_name} for symbol: {normalized}"
            ) from e
        except aiohttp.ClientError as e:
            logger.error(f"Error calling AlphaVantage API for symbol {normalized}: {e}")
            raise NetworkError(
                f"Failed to call function {function_name} for symbol: {normalized}"
            ) from e

        if response.has_error():
            error_msg = response.error_message()
            logger.warning(f"AlphaVantage API returned error for symbol {normalized}: {error_msg}")
            raise UpstreamApplicationError(error_msg)

        logger.info(f"Successfully called function {function_name} for symbol: {normalized}")
        return response

    async def _get(self, params: Dict[str, str]) -> QuoteResponse:
        if self._session is not None:
            return await self._request(self._session, params)
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            return await self._request(session, params)

    async def _request(self, session: aiohttp.ClientSession, params: Dict[str, str]) -> QuoteResponse:
        async with session.get(self.query_url, params=params, timeout=self.timeout) as response:
            status = response.status
            if not 200 <= status < 300:
                logger.error(f"HTTP error calling AlphaVantage API: {status} {response.reason}")
                raise UpstreamHttpError(status, f"HTTP error: {status} - {response.reason}")

            try:
                body: Any = await response.json(content_type=None)
            except ValueError as e:
                raise UpstreamApplicationError(
                    "AlphaVantage returned a malformed JSON body", code="INVALID_RESPONSE"
                ) from e

        if not isinstance(body, dict):
            raise UpstreamApplicationError(
                "AlphaVantage returned an unexpected response body", code="INVALID_RESPONSE"
            )
        return QuoteResponse(data=body)

"""Stock quote service: validates symbols and delegates to AlphaVantage."""

from typing import Any, Dict, Optional

from stock_quote_mcp.core.exceptions import InvalidArgumentError
from stock_quote_mcp.core.models import QuoteResponse, StockQuoteRequest
from stock_quote_mcp.core.validation import is_valid_symbol
from stock_quote_mcp.services.alphavantage import AlphaVantageClient
from stock_quote_mcp.utils.logger import logger


class StockQuoteService:
    """Validates incoming symbols before any call reaches AlphaVantage."""

    def __init__(self, client: Optional[AlphaVantageClient] = None):
        self.client = client or AlphaVantageClient()

    @staticmethod
    def is_valid_symbol(symbol: Any) -> bool:
        return is_valid_symbol(symbol)

    async def get_stock_quote(self, symbol: Any) -> QuoteResponse:
        """Get the global quote for a symbol."""
        logger.info(f"Processing stock quote request for symbol: {symbol}")

        try:
            request = StockQuoteRequest.build(symbol)
            if not self.is_valid_symbol(symbol):
                raise InvalidArgumentError("Invalid stock symbol format")
        except InvalidArgumentError as e:
            logger.warning(f"Invalid stock quote request: {e}")
            raise

        try:
            response = await self.client.get_global_quote(request.symbol)
        except Exception as e:
            logger.error(f"Failed to process stock quote for symbol {symbol}: {e}")
            raise

        logger.info(f"Successfully processed stock quote for symbol: {symbol}")
        return response

    async def get_stock_data(
        self,
        function: str,
        symbol: Any,
        extra_params: Optional[Dict[str, str]] = None,
    ) -> QuoteResponse:
        """Call any AlphaVantage function for a symbol."""
        logger.info(f"Processing stock data request for function: {function} and symbol: {symbol}")

        if not self.is_valid_symbol(symbol):
            logger.warning(f"Invalid stock symbol format: {symbol}")
            raise InvalidArgumentError("Invalid stock symbol format")

        try:
            request = StockQuoteRequest.build(symbol, function=function, extra_params=extra_params or {})
        except InvalidArgumentError as e:
            logger.warning(f"Invalid stock data request: {e}")
            raise

        try:
            response = await self.client.fetch_quote(
                request.symbol, request.function, request.extra_params or None
            )
        except Exception as e:
            logger.error(f"Failed to process stock data for function {function} and symbol {symbol}: {e}")
            raise

        logger.info(f"Successfully processed stock data for function: {function} and symbol: {symbol}")
        return response

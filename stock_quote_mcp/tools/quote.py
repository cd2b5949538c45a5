"""Stock quote tool backed by AlphaVantage GLOBAL_QUOTE."""

from typing import Any, Dict

from stock_quote_mcp.services.stock_quote import StockQuoteService
from stock_quote_mcp.tools.base import BaseTool
from stock_quote_mcp.utils.logger import logger


class QuoteTool(BaseTool):
    """Tool returning the raw AlphaVantage global quote for a symbol."""

    def __init__(self, service: StockQuoteService):
        super().__init__(
            name="quote",
            description="Get real-time stock quote information for a given stock symbol using AlphaVantage API",
        )
        self.service = service

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "symbol": {
                    "type": "string",
                    "description": "Stock ticker symbol (e.g., 'IBM', 'AAPL', 'MSFT'). Must be 1-5 uppercase letters.",
                },
            },
            "required": ["symbol"],
        }

    async def execute(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        symbol = arguments.get("symbol")

        if not isinstance(symbol, str) or not symbol.strip():
            return self.missing_symbol()

        if not self.service.is_valid_symbol(symbol):
            logger.warning(f"Invalid symbol format provided: {symbol}")
            return {
                "error": "Invalid symbol format",
                "message": "Stock symbol must be 1-5 uppercase letters (e.g., 'IBM', 'AAPL')",
                "symbol": symbol,
            }

        try:
            response = await self.service.get_stock_quote(symbol)
        except Exception as e:
            logger.error(f"Error retrieving stock quote for symbol {symbol}: {e}")
            return {
                "error": "Failed to retrieve stock quote",
                "message": str(e),
                "symbol": symbol,
            }

        logger.info(f"Successfully retrieved stock quote for symbol: {symbol}")
        return response.data

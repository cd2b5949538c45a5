"""Symbol format validation tool."""

from typing import Any, Dict

from stock_quote_mcp.services.stock_quote import StockQuoteService
from stock_quote_mcp.tools.base import BaseTool
from stock_quote_mcp.utils.logger import logger


class ValidateSymbolTool(BaseTool):
    """Tool checking whether a symbol is 1-5 letters, without calling AlphaVantage."""

    def __init__(self, service: StockQuoteService):
        super().__init__(
            name="validate_symbol",
            description="Validate if a stock symbol has the correct format",
        )
        self.service = service

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "symbol": {
                    "type": "string",
                    "description": "Stock ticker symbol to validate",
                },
            },
            "required": ["symbol"],
        }

    async def execute(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        symbol = arguments.get("symbol")
        if symbol is None:
            return self.missing_symbol()

        logger.info(f"Validating symbol: {symbol}")
        is_valid = self.service.is_valid_symbol(symbol)

        return {
            "symbol": symbol,
            "valid": is_valid,
            "message": "Valid stock symbol format"
            if is_valid
            else "Invalid stock symbol format. Must be 1-5 uppercase letters.",
        }

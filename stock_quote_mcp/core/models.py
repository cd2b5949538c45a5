"""Pydantic models for quote requests and upstream responses."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from stock_quote_mcp.core.exceptions import InvalidArgumentError

GLOBAL_QUOTE = "GLOBAL_QUOTE"

# Keys AlphaVantage uses to report errors inside a 200 body, in priority order
ERROR_SENTINEL_KEYS = ("Error Message", "Note", "Information")


class QuoteResponse(BaseModel):
    """Raw AlphaVantage payload. The shape varies per function, so keys are kept verbatim."""

    data: Dict[str, Any] = Field(default_factory=dict, description="Upstream JSON object")

    def has_error(self) -> bool:
        return any(key in self.data for key in ERROR_SENTINEL_KEYS)

    def error_message(self) -> Optional[str]:
        for key in ERROR_SENTINEL_KEYS:
            if key in self.data:
                return str(self.data[key])
        return None


class StockQuoteRequest(BaseModel):
    """Normalized request for one AlphaVantage function call."""

    symbol: str = Field(
        ...,
        pattern=r"^[A-Z]{1,5}$",
        description="Stock ticker symbol, 1-5 uppercase letters",
    )
    function: str = Field(GLOBAL_QUOTE, min_length=1, description="AlphaVantage function name")
    extra_params: Dict[str, str] = Field(default_factory=dict, description="Additional query parameters")

    @field_validator("symbol", mode="before")
    @classmethod
    def _normalize_symbol(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("function", mode="before")
    @classmethod
    def _strip_function(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def build(cls, symbol: Any, **kwargs: Any) -> "StockQuoteRequest":
        """Create a request, converting validation failures to InvalidArgumentError."""
        if symbol is None or (isinstance(symbol, str) and not symbol.strip()):
            raise InvalidArgumentError("Stock symbol is required")
        try:
            return cls(symbol=symbol, **kwargs)
        except ValidationError as e:
            errors = e.errors()
            if errors and errors[0]["loc"] and errors[0]["loc"][0] == "symbol":
                raise InvalidArgumentError("Stock symbol must be 1-5 uppercase letters") from e
            raise InvalidArgumentError(errors[0]["msg"] if errors else str(e)) from e

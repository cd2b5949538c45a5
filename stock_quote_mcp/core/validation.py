"""Stock symbol format validation."""

import re
from typing import Any

SYMBOL_PATTERN = re.compile(r"^[A-Za-z]{1,5}$")


def is_valid_symbol(symbol: Any) -> bool:
    """Return True if symbol is 1-5 ASCII letters once surrounding whitespace is removed."""
    if not isinstance(symbol, str) or not symbol.strip():
        return False
    return SYMBOL_PATTERN.match(symbol.strip()) is not None


def normalize_symbol(symbol: str) -> str:
    """Trim and uppercase a stock symbol."""
    return symbol.strip().upper()

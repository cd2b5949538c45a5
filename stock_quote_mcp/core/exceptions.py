"""Error kinds raised by the AlphaVantage client and quote service."""

from typing import Optional


class InvalidArgumentError(ValueError):
    """Caller supplied a missing or malformed argument."""


class AlphaVantageError(Exception):
    """Base class for failures talking to the AlphaVantage API."""

    default_code = "ALPHAVANTAGE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class UpstreamHttpError(AlphaVantageError):
    """AlphaVantage answered with a non-2xx HTTP status."""

    default_code = "HTTP_ERROR"

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"HTTP error: {status_code}")
        self.status_code = status_code


class UpstreamApplicationError(AlphaVantageError):
    """AlphaVantage answered 2xx but the body reports an error."""

    default_code = "API_ERROR"


class NetworkError(AlphaVantageError):
    """Transport failure or timeout before a response was received."""

    default_code = "NETWORK_ERROR"

"""Translation of uncaught exceptions into HTTP error responses."""

from typing import Any, Dict, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stock_quote_mcp.core.exceptions import (
    AlphaVantageError,
    InvalidArgumentError,
    NetworkError,
    UpstreamHttpError,
)
from stock_quote_mcp.utils.logger import logger


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def map_exception(exc: Exception) -> Tuple[int, Dict[str, Any]]:
    """Return the HTTP status and body for an exception that escaped the tool layer."""
    if isinstance(exc, NetworkError):
        logger.error(f"Network error calling AlphaVantage API: {exc}")
        return 503, {
            "error": "Network Error",
            "message": "Failed to connect to AlphaVantage API",
        }

    if isinstance(exc, UpstreamHttpError):
        logger.error(f"HTTP error calling AlphaVantage API: {exc.status_code} - {exc}")
        return 502, {
            "error": "HTTP Error",
            "message": "Failed to call AlphaVantage API",
            "status": exc.status_code,
        }

    if isinstance(exc, AlphaVantageError):
        logger.error(f"AlphaVantage API error: {exc}")
        return 502, {
            "error": "AlphaVantage API Error",
            "message": exc.message,
            "code": exc.code,
        }

    if isinstance(exc, InvalidArgumentError):
        logger.warning(f"Invalid argument: {exc}")
        return 400, {"error": "Invalid Argument", "message": str(exc)}

    if isinstance(exc, RequestValidationError):
        message = _validation_message(exc)
        logger.warning(f"Invalid argument: {message}")
        return 400, {"error": "Invalid Argument", "message": message}

    logger.error(f"Unexpected error: {exc}", exc_info=exc)
    return 500, {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
    }


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    status_code, body = map_exception(exc)
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI):
    """Install the error mapping on a FastAPI application."""
    for exc_class in (AlphaVantageError, InvalidArgumentError, RequestValidationError, Exception):
        app.add_exception_handler(exc_class, handle_exception)

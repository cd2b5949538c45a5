"""Logging configuration."""

import logging
import re
import sys
from pathlib import Path
from typing import Iterable, Optional

from stock_quote_mcp.utils.config import settings

REDACTED = "***"
APIKEY_QUERY_PARAM = re.compile(r"(apikey=)[^&\s'\"]+", re.IGNORECASE)


class ApiKeyRedactionFilter(logging.Filter):
    """Mask AlphaVantage API keys in log messages and tracebacks.

    Keys leak through exception text, e.g. aiohttp errors that carry the
    full request URL including the ``apikey`` query parameter.
    """

    def __init__(self, secrets: Optional[Iterable[str]] = None):
        super().__init__()
        self._secrets = [secret for secret in (secrets or ()) if secret]

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, REDACTED)
        return APIKEY_QUERY_PARAM.sub(rf"\g<1>{REDACTED}", text)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None

        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)
        return True


def setup_logger(name: str = "stock_quote_mcp") -> logging.Logger:
    """Setup and configure logger."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # Remove existing handlers and filters
    logger.handlers.clear()
    logger.filters.clear()

    # Applied on the logger so propagated records are masked as well
    logger.addFilter(ApiKeyRedactionFilter([settings.alphavantage_api_key]))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if not settings.debug:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "app.log")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Global logger instance
logger = setup_logger()

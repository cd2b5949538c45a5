"""Tests for the quote and validate_symbol tools and the ToolRegistry."""

import pytest

from stock_quote_mcp.core.exceptions import NetworkError, UpstreamApplicationError
from stock_quote_mcp.tools.registry import ToolRegistry

from conftest import IBM_QUOTE


@pytest.fixture
def registry_with(make_service):
    """Build a ToolRegistry around a stub client."""

    def _make(payload=None, error=None):
        service, client = make_service(payload=payload, error=error)
        return ToolRegistry(service=service), client

    return _make


def test_registry_lists_tools(registry_with):
    """Both tools are registered in order."""
    registry, _ = registry_with()
    assert registry.list_tools() == ["quote", "validate_symbol"]


def test_descriptors_require_symbol(registry_with):
    """Each descriptor declares a required string symbol."""
    registry, _ = registry_with()
    for descriptor in registry.get_descriptors():
        assert set(descriptor) == {"name", "description", "inputSchema"}
        schema = descriptor["inputSchema"]
        assert schema["type"] == "object"
        assert schema["properties"]["symbol"]["type"] == "string"
        assert schema["required"] == ["symbol"]


@pytest.mark.asyncio
async def test_unknown_tool(registry_with):
    """Unknown tools produce an in-band error naming the tool."""
    registry, _ = registry_with()

    result = await registry.call_tool("price_history", {"symbol": "IBM"})

    assert result == {
        "error": "Unknown tool",
        "message": "Tool 'price_history' is not supported",
        "tool": "price_history",
    }


@pytest.mark.asyncio
async def test_validate_symbol_valid(registry_with):
    """A well-formed symbol validates."""
    registry, client = registry_with()

    result = await registry.call_tool("validate_symbol", {"symbol": "IBM"})

    assert result == {"symbol": "IBM", "valid": True, "message": "Valid stock symbol format"}
    assert client.calls == []


@pytest.mark.asyncio
async def test_validate_symbol_too_long(registry_with):
    """Symbols longer than five letters are invalid."""
    registry, _ = registry_with()

    result = await registry.call_tool("validate_symbol", {"symbol": "TOOLONG"})

    assert result["symbol"] == "TOOLONG"
    assert result["valid"] is False
    assert result["message"] == "Invalid stock symbol format. Must be 1-5 uppercase letters."


@pytest.mark.asyncio
async def test_validate_symbol_missing(registry_with):
    """validate_symbol without a symbol reports it missing."""
    registry, _ = registry_with()

    result = await registry.call_tool("validate_symbol", {})

    assert result["error"] == "Missing symbol"


@pytest.mark.asyncio
@pytest.mark.parametrize("arguments", [{}, {"symbol": ""}, {"symbol": "   "}, {"symbol": None}, None])
async def test_quote_missing_symbol(registry_with, arguments):
    """A missing symbol never reaches the upstream client."""
    registry, client = registry_with()

    result = await registry.call_tool("quote", arguments)

    assert result == {"error": "Missing symbol", "message": "Symbol parameter is required"}
    assert client.calls == []


@pytest.mark.asyncio
async def test_quote_invalid_format(registry_with):
    """A malformed symbol is rejected with the symbol echoed back."""
    registry, client = registry_with()

    result = await registry.call_tool("quote", {"symbol": "IBM123"})

    assert result["error"] == "Invalid symbol format"
    assert result["symbol"] == "IBM123"
    assert "1-5 uppercase letters" in result["message"]
    assert client.calls == []


@pytest.mark.asyncio
async def test_quote_success_returns_payload(registry_with):
    """A clean upstream payload is returned unmodified."""
    registry, client = registry_with()

    result = await registry.call_tool("quote", {"symbol": "ibm"})

    assert result == IBM_QUOTE
    assert client.calls[0]["symbol"] == "IBM"


@pytest.mark.asyncio
async def test_quote_upstream_error_message(registry_with):
    """An upstream 'Error Message' becomes an error object, not raw data."""
    message = "Invalid API call. Please retry or visit the documentation."
    registry, _ = registry_with(error=UpstreamApplicationError(message))

    result = await registry.call_tool("quote", {"symbol": "ZZZZ"})

    assert result == {
        "error": "Failed to retrieve stock quote",
        "message": message,
        "symbol": "ZZZZ",
    }


@pytest.mark.asyncio
async def test_quote_network_error(registry_with):
    """Network failures are reported in-band."""
    registry, _ = registry_with(error=NetworkError("Timed out calling function GLOBAL_QUOTE for symbol: IBM"))

    result = await registry.call_tool("quote", {"symbol": "IBM"})

    assert result["error"] == "Failed to retrieve stock quote"
    assert "Timed out" in result["message"]

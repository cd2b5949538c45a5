"""Shared FastAPI dependencies."""

from stock_quote_mcp.tools.registry import ToolRegistry, tool_registry


def get_tool_registry() -> ToolRegistry:
    return tool_registry


__all__ = ["get_tool_registry"]

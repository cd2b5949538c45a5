"""Tool registry for managing the MCP tools."""

from typing import Any, Dict, List, Optional

from stock_quote_mcp.services.stock_quote import StockQuoteService
from stock_quote_mcp.tools.base import BaseTool
from stock_quote_mcp.tools.quote import QuoteTool
from stock_quote_mcp.tools.validate_symbol import ValidateSymbolTool
from stock_quote_mcp.utils.logger import logger


class ToolRegistry:
    """Registry for discovering and dispatching tools."""

    def __init__(self, service: Optional[StockQuoteService] = None):
        self._tools: Dict[str, BaseTool] = {}
        self._initialize_tools(service or StockQuoteService())

    def _initialize_tools(self, service: StockQuoteService):
        """Initialize and register all tools."""
        tools = [
            QuoteTool(service),
            ValidateSymbolTool(service),
        ]

        for tool in tools:
            self.register_tool(tool)
            logger.info(f"Registered tool: {tool.name}")

    def register_tool(self, tool: BaseTool):
        """Register a tool."""
        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> List[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def get_descriptors(self) -> List[Dict[str, Any]]:
        """MCP descriptors for every registered tool."""
        return [tool.descriptor() for tool in self._tools.values()]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run a tool by name. Unknown names produce an in-band error result."""
        tool = self.get_tool(name)
        if tool is None:
            logger.warning(f"Unknown tool called: {name}")
            return {
                "error": "Unknown tool",
                "message": f"Tool '{name}' is not supported",
                "tool": name,
            }
        return await tool.execute(arguments or {})


# Global registry instance
tool_registry = ToolRegistry()

"""MCP tool routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from stock_quote_mcp.api.dependencies import get_tool_registry
from stock_quote_mcp.api.schemas import ToolCallRequest, ToolCallResponse, ToolListResponse
from stock_quote_mcp.tools.registry import ToolRegistry
from stock_quote_mcp.utils.logger import logger

router = APIRouter(tags=["mcp"])


@router.get("/tools", response_model=ToolListResponse)
async def list_tools(registry: ToolRegistry = Depends(get_tool_registry)):
    """List available tools."""
    logger.info("MCP tools list requested")
    return {"tools": registry.get_descriptors()}


@router.post("/tools/call", response_model=ToolCallResponse)
async def call_tool(request: ToolCallRequest, registry: ToolRegistry = Depends(get_tool_registry)):
    """Invoke a tool and wrap its result in a text content envelope."""
    logger.info(f"MCP tool '{request.name}' called with arguments: {request.arguments}")
    result = await registry.call_tool(request.name, request.arguments)
    return ToolCallResponse.wrap(result)


@router.get("/quote/{symbol}")
async def get_quote(symbol: str, registry: ToolRegistry = Depends(get_tool_registry)) -> Dict[str, Any]:
    """Direct quote lookup, returning the result without the envelope."""
    logger.info(f"Direct quote request for symbol: {symbol}")
    return await registry.call_tool("quote", {"symbol": symbol})

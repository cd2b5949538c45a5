"""Pydantic schemas for MCP requests and responses."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class ToolDescriptor(BaseModel):
    """Tool advertised by the tools listing."""

    name: str
    description: str
    inputSchema: Dict[str, Any]


class ToolListResponse(BaseModel):
    """Response for the tools listing."""

    tools: List[ToolDescriptor]


class ToolCallRequest(BaseModel):
    """Request to invoke a tool by name."""

    name: str = Field(..., description="Tool name", min_length=1)
    arguments: Optional[Dict[str, Any]] = Field(default=None, description="Tool arguments")


class TextContent(BaseModel):
    """Single content item of a tool result."""

    type: Literal["text"] = "text"
    text: Dict[str, Any]


class ToolCallResponse(BaseModel):
    """Envelope wrapping a tool result."""

    content: List[TextContent]

    @classmethod
    def wrap(cls, result: Dict[str, Any]) -> "ToolCallResponse":
        return cls(content=[TextContent(text=result)])

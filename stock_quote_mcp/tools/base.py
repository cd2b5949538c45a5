"""Base tool interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseTool(ABC):
    """Abstract base class for MCP tools."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        """Return JSON schema for tool inputs."""
        pass

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the tool with the given arguments.

        Returns:
            Result object. Failures are reported in-band with 'error' and 'message' keys.
        """
        pass

    def descriptor(self) -> Dict[str, Any]:
        """MCP tool descriptor as returned by the tools listing."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }

    @staticmethod
    def missing_symbol() -> Dict[str, Any]:
        return {
            "error": "Missing symbol",
            "message": "Symbol parameter is required",
        }

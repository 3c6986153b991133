"""Central registry for managing tool instances."""

from __future__ import annotations

from typing import Any

from uploadfile_mcp.errors import UnknownToolError
from uploadfile_mcp.tools.protocol import Tool


class ToolRegistry:
    """
    Registry for managing tool instances.

    Example:
        registry = ToolRegistry()
        registry.register(upload_file_tool)

        tool = registry.get("upload_file")
        result = await registry.execute_async("upload_file", file_path="a.png")
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """
        Register a tool instance.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool with name '{tool.name}' already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        """Retrieve tool by name, or None if unknown."""
        return self._tools.get(name)

    def all(self) -> list[Tool]:
        """Get all registered tools in registration order."""
        return list(self._tools.values())

    async def execute_async(self, name: str, **kwargs: Any) -> dict[str, Any]:
        """
        Execute a tool by name with parameters.

        Raises:
            UnknownToolError: If no tool is registered under ``name``
            UploadError: Whatever the tool raises
        """
        tool = self.get(name)
        if tool is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        return await tool.execute_async(**kwargs)

    def __len__(self) -> int:
        """Return number of registered tools."""
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        """Check if tool is registered."""
        return name in self._tools

"""Tool protocol shared by the upload tools and the MCP frontend."""

from __future__ import annotations

from typing import Any, Protocol, TypedDict, runtime_checkable


class ToolParameter(TypedDict, total=False):
    """JSON Schema for a single parameter."""

    type: str
    description: str


class ToolInputSchema(TypedDict):
    """JSON Schema for tool input parameters."""

    type: str  # Always "object"
    properties: dict[str, ToolParameter]
    required: list[str]


@runtime_checkable
class Tool(Protocol):
    """
    Protocol for tools callable by name with a plain argument map.

    A tool exposes its name, description and JSON input schema for tool
    listing, and ``execute_async`` returning a JSON-serializable dict.
    Failures are raised as ``UploadError`` subclasses, never returned
    alongside a payload.
    """

    @property
    def name(self) -> str:
        """Unique tool identifier (e.g., 'upload_file')."""
        ...

    @property
    def description(self) -> str:
        """Human-readable tool description for LLM context."""
        ...

    @property
    def input_schema(self) -> ToolInputSchema:
        """JSON Schema defining tool parameters."""
        ...

    async def execute_async(self, **kwargs: Any) -> dict[str, Any]:
        """
        Execute tool with provided parameters.

        Args:
            **kwargs: Parameters matching input_schema

        Returns:
            JSON-serializable dict with results

        Raises:
            UploadError: On any failure
        """
        ...

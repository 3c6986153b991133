"""Base implementation for tools implementing the Tool protocol."""

from __future__ import annotations

from typing import Any

from uploadfile_mcp.errors import UploadError, UploadInternalError
from uploadfile_mcp.tools.protocol import ToolInputSchema


class StandardTool:
    """
    Base class providing common Tool protocol implementation.

    Subclasses must override:
    - _name: Tool name
    - _description: Tool description
    - _input_schema: Parameter schema
    - _failure_prefix: Prefix of the message for unexpected failures
    - _execute_impl: Core execution logic (async)

    ``execute_async`` is the error boundary of a tool: ``UploadError``
    passes through untouched and anything else is re-raised as
    ``UploadInternalError("<prefix>: <cause>")``.

    Example:
        class EchoTool(StandardTool):
            _name = "echo"
            _description = "Echo the input back"
            _failure_prefix = "Failed to echo"
            _input_schema: ToolInputSchema = {
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "Text to echo"}
                },
                "required": ["text"],
            }

            async def _execute_impl(self, **kwargs: Any) -> dict[str, Any]:
                return {"success": True, "text": kwargs["text"]}
    """

    _name: str
    _description: str
    _input_schema: ToolInputSchema
    _failure_prefix: str = "Tool failed"

    @property
    def name(self) -> str:
        """Return the tool name."""
        return self._name

    @property
    def description(self) -> str:
        """Return the tool description."""
        return self._description

    @property
    def input_schema(self) -> ToolInputSchema:
        """Return the input schema."""
        return self._input_schema

    async def execute_async(self, **kwargs: Any) -> dict[str, Any]:
        """
        Execute tool logic and normalize failures.

        Args:
            **kwargs: Parameters matching input_schema

        Returns:
            JSON-serializable dict with results

        Raises:
            UploadError: Typed failure; never a raw low-level exception
        """
        try:
            return await self._execute_impl(**kwargs)
        except UploadError:
            raise
        except Exception as exc:
            raise UploadInternalError(f"{self._failure_prefix}: {exc}") from exc

    async def _execute_impl(self, **kwargs: Any) -> dict[str, Any]:
        """
        Override in subclass to implement tool logic.

        Raises:
            NotImplementedError: If subclass doesn't implement this method
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _execute_impl"
        )

"""MCP server exposing the upload tools via the Anthropic MCP SDK."""

from __future__ import annotations

import json
import sys
from typing import Any

from dotenv import load_dotenv
from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.shared.exceptions import McpError

from uploadfile_mcp.adapters.storage.http_put import CurlTransfer, Transfer
from uploadfile_mcp.config import UploadSettings, load_settings_from_env
from uploadfile_mcp.errors import UploadError
from uploadfile_mcp.tools.registry import ToolRegistry
from uploadfile_mcp.tools.upload import (
    ContentUploader,
    PathUploader,
    UploadFileContentTool,
    UploadFileTool,
)

SERVER_NAME = "uploadfile-mcp"


def configure_logging(level: str) -> None:
    """Send loguru output to stderr; stdout carries the MCP stream."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}",
        level=level,
    )


def build_registry(
    settings: UploadSettings, transfer: Transfer | None = None
) -> ToolRegistry:
    """Wire both upload tools against one transfer."""
    if transfer is None:
        transfer = CurlTransfer(settings.storage, curl_binary=settings.curl_binary)

    registry = ToolRegistry()
    registry.register(UploadFileTool(PathUploader(transfer)))
    registry.register(
        UploadFileContentTool(ContentUploader(transfer, settings.staging_dir))
    )
    return registry


async def call_tool(registry: ToolRegistry, name: str, **arguments: Any) -> str:
    """Run a registered tool and render its result as indented JSON text.

    Raises:
        McpError: Carrying the JSON-RPC code and message of the failure.
    """
    try:
        result = await registry.execute_async(name, **arguments)
    except UploadError as exc:
        logger.bind(tool=name, kind=exc.kind).warning(
            "{} failed: {}", name, exc.message
        )
        raise McpError(exc.to_error_data()) from exc
    return json.dumps(result, indent=2)


def create_server(registry: ToolRegistry) -> FastMCP:
    """Create a FastMCP server whose tools delegate to ``registry``."""
    mcp = FastMCP(name=SERVER_NAME)
    path_tool = registry.get("upload_file")
    content_tool = registry.get("upload_file_content")
    if path_tool is None or content_tool is None:
        raise ValueError("registry must provide upload_file and upload_file_content")

    @mcp.tool(name=path_tool.name, description=path_tool.description)
    async def upload_file(file_path: str, content_type: str | None = None) -> str:
        """Upload a local file and return the public URL."""
        return await call_tool(
            registry, "upload_file", file_path=file_path, content_type=content_type
        )

    @mcp.tool(name=content_tool.name, description=content_tool.description)
    async def upload_file_content(
        content: str, filename: str, mime_type: str | None = None
    ) -> str:
        """Upload base64 file content and return the public URL."""
        return await call_tool(
            registry,
            "upload_file_content",
            content=content,
            filename=filename,
            mime_type=mime_type,
        )

    return mcp


def main() -> None:
    """Console entrypoint: serve the upload tools over stdio."""
    load_dotenv(override=False)
    settings = load_settings_from_env()
    configure_logging(settings.log_level)

    server = create_server(build_registry(settings))
    logger.info("Upload MCP Server running on stdio")
    server.run()


if __name__ == "__main__":
    main()

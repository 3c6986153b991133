"""Tool for publishing a local file by path."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from uploadfile_mcp.adapters.storage.http_put import Transfer, make_destination_key
from uploadfile_mcp.errors import InvalidParamsError
from uploadfile_mcp.tools.base import StandardTool
from uploadfile_mcp.tools.protocol import ToolInputSchema
from uploadfile_mcp.tools.upload.logger import UploadLogger
from uploadfile_mcp.tools.upload.mime import PATH_MIME_RESOLVER, MimeResolver
from uploadfile_mcp.tools.upload.publish import publish
from uploadfile_mcp.tools.upload.results import PathUploadResult


class PathUploader:
    """Publish an existing local file straight from disk."""

    def __init__(
        self,
        transfer: Transfer,
        *,
        mime_resolver: MimeResolver = PATH_MIME_RESOLVER,
        upload_logger: UploadLogger | None = None,
    ) -> None:
        self._transfer = transfer
        self._mime_resolver = mime_resolver
        self._logger = upload_logger or UploadLogger()

    async def upload(
        self, file_path: str, content_type: str | None = None
    ) -> PathUploadResult:
        """Upload the file at ``file_path`` into a fresh folder.

        Args:
            file_path: Local path of the file to publish.
            content_type: MIME type; detected from the extension if omitted.

        Returns:
            PathUploadResult describing the published object.

        Raises:
            InvalidParamsError: If the path is empty or no file exists there.
            TransferFailedError: If the PUT fails.
        """
        if not isinstance(file_path, str) or not file_path:
            raise InvalidParamsError("file_path is required")
        source = Path(file_path)
        if not source.is_file():
            raise InvalidParamsError(f"File not found: {file_path}")

        key = make_destination_key(file_path)
        resolved_type = self._mime_resolver.resolve(file_path, content_type)

        self._logger.upload_started("upload_file", key)
        url = await publish(self._transfer, source, key, resolved_type, self._logger)

        return PathUploadResult(
            file_path=file_path,
            folder_id=key.folder_id,
            original_filename=key.filename,
            content_type=resolved_type,
            remote_path=key.remote_path,
            url=url,
        )


class UploadFileTool(StandardTool):
    """Tool wrapper exposing ``PathUploader`` through the Tool protocol."""

    _name = "upload_file"
    _description = (
        "Upload a local file to S3-compatible storage and get a shareable URL. "
        "Files are automatically organized in UUID folders."
    )
    _failure_prefix = "Failed to upload file"
    _input_schema: ToolInputSchema = {
        "type": "object",
        "properties": {
            "file_path": {
                "type": "string",
                "description": "Local path to the file to upload",
            },
            "content_type": {
                "type": "string",
                "description": (
                    "Optional MIME type of the file (e.g., image/png, text/plain, "
                    "application/pdf). If not provided, will be auto-detected "
                    "from file extension."
                ),
            },
        },
        "required": ["file_path"],
    }

    def __init__(self, uploader: PathUploader) -> None:
        self._uploader = uploader

    async def _execute_impl(self, **kwargs: Any) -> dict[str, Any]:
        result = await self._uploader.upload(
            kwargs.get("file_path", ""), kwargs.get("content_type")
        )
        return result.to_dict()

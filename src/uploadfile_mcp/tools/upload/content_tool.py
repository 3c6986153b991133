"""Tool for publishing inline base64 content."""

from __future__ import annotations

import base64
from pathlib import Path
import re
from typing import Any

from uploadfile_mcp.adapters.storage.http_put import Transfer, make_destination_key
from uploadfile_mcp.errors import InvalidParamsError
from uploadfile_mcp.tools.base import StandardTool
from uploadfile_mcp.tools.protocol import ToolInputSchema
from uploadfile_mcp.tools.upload.logger import UploadLogger
from uploadfile_mcp.tools.upload.mime import CONTENT_MIME_RESOLVER, MimeResolver
from uploadfile_mcp.tools.upload.publish import publish
from uploadfile_mcp.tools.upload.results import ContentUploadResult
from uploadfile_mcp.tools.upload.staging import staged_file

# Only this many leading characters are checked before the full decode.
BASE64_CHECK_LENGTH = 100

_DATA_URL_RE = re.compile(r"data:(.+?);base64,(.+)")
_ASCII_WHITESPACE_RE = re.compile(r"[\t\n\f\r ]")
_BASE64_BODY_RE = re.compile(r"[A-Za-z0-9+/]*")


def split_data_url(content: str) -> tuple[str | None, str]:
    """Split ``data:<mime>;base64,<payload>`` into ``(mime, payload)``.

    Content without a well-formed single-line data URL prefix is returned
    as ``(None, content)``.
    """
    if content.startswith("data:"):
        match = _DATA_URL_RE.fullmatch(content)
        if match:
            return match.group(1), match.group(2)
    return None, content


def looks_like_base64(content: str) -> bool:
    """Check that the leading characters of ``content`` are valid base64.

    Mirrors forgiving base64 decoding: ASCII whitespace is ignored and
    trailing padding may be missing.
    """
    sample = _ASCII_WHITESPACE_RE.sub("", content[:BASE64_CHECK_LENGTH])
    if len(sample) % 4 == 0:
        sample = sample.removesuffix("=").removesuffix("=")
    if len(sample) % 4 == 1:
        return False
    return _BASE64_BODY_RE.fullmatch(sample) is not None


def decode_base64(content: str) -> bytes:
    """Decode the full payload, completing any missing padding.

    A stray character left after the last complete quantum is dropped.

    Raises:
        binascii.Error: If the payload cannot be decoded.
    """
    cleaned = _ASCII_WHITESPACE_RE.sub("", content).rstrip("=")
    # a lone trailing character carries no full byte
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    return base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))


class ContentUploader:
    """Decode inline content, stage it on disk and publish it."""

    def __init__(
        self,
        transfer: Transfer,
        staging_dir: Path,
        *,
        mime_resolver: MimeResolver = CONTENT_MIME_RESOLVER,
        upload_logger: UploadLogger | None = None,
    ) -> None:
        self._transfer = transfer
        self._staging_dir = staging_dir
        self._mime_resolver = mime_resolver
        self._logger = upload_logger or UploadLogger()

    async def upload(
        self, content: str, filename: str, mime_type: str | None = None
    ) -> ContentUploadResult:
        """Upload base64 ``content`` as ``filename`` into a fresh folder.

        MIME type precedence: ``mime_type``, then the data URL prefix of
        ``content``, then the extension of ``filename``, then
        ``application/octet-stream``.

        Raises:
            InvalidParamsError: If an argument is missing or the content is
                not base64.
            TransferFailedError: If the PUT fails.
        """
        if not isinstance(content, str) or not isinstance(filename, str):
            raise InvalidParamsError("content and filename are required")
        if not content or not filename:
            raise InvalidParamsError("content and filename are required")

        inline_type, payload = split_data_url(content)
        if not looks_like_base64(payload):
            raise InvalidParamsError("Invalid base64 content provided")

        key = make_destination_key(filename)
        data = decode_base64(payload)
        resolved_type = self._mime_resolver.resolve(
            filename, mime_type or inline_type
        )

        self._logger.upload_started("upload_file_content", key)
        with staged_file(self._staging_dir, key, data, self._logger) as staged_path:
            url = await publish(
                self._transfer, staged_path, key, resolved_type, self._logger
            )

        return ContentUploadResult(
            filename=key.filename,
            folder_id=key.folder_id,
            mime_type=resolved_type,
            remote_path=key.remote_path,
            url=url,
            content_size=len(data),
        )


class UploadFileContentTool(StandardTool):
    """Tool wrapper exposing ``ContentUploader`` through the Tool protocol."""

    _name = "upload_file_content"
    _description = (
        "Upload file content directly to S3-compatible storage and get a "
        "shareable URL. Files are automatically organized in UUID folders."
    )
    _failure_prefix = "Failed to upload file content"
    _input_schema: ToolInputSchema = {
        "type": "object",
        "properties": {
            "content": {
                "type": "string",
                "description": "Base64-encoded file content",
            },
            "filename": {
                "type": "string",
                "description": "Original filename with extension",
            },
            "mime_type": {
                "type": "string",
                "description": (
                    "MIME type of the file content (e.g., image/png, text/plain, "
                    "application/pdf)"
                ),
            },
        },
        "required": ["content", "filename"],
    }

    def __init__(self, uploader: ContentUploader) -> None:
        self._uploader = uploader

    async def _execute_impl(self, **kwargs: Any) -> dict[str, Any]:
        result = await self._uploader.upload(
            kwargs.get("content", ""),
            kwargs.get("filename", ""),
            kwargs.get("mime_type"),
        )
        return result.to_dict()

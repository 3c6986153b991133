"""Extension based MIME type resolution.

Two independent tables back the two upload tools. ``upload_file`` falls
back to ``image/jpeg`` for unknown extensions while ``upload_file_content``
falls back to ``application/octet-stream``; both defaults are part of the
documented tool behavior.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath
from types import MappingProxyType

PATH_DEFAULT_MIME_TYPE = "image/jpeg"
CONTENT_DEFAULT_MIME_TYPE = "application/octet-stream"

PATH_MIME_TABLE: Mapping[str, str] = MappingProxyType(
    {
        # Images
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".webp": "image/webp",
        ".svg": "image/svg+xml",
        ".bmp": "image/bmp",
        ".ico": "image/x-icon",
        ".tiff": "image/tiff",
        ".tif": "image/tiff",
        # Documents
        ".pdf": "application/pdf",
        ".doc": "application/msword",
        ".docx": (
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        ),
        ".xls": "application/vnd.ms-excel",
        ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        ".ppt": "application/vnd.ms-powerpoint",
        ".pptx": (
            "application/vnd.openxmlformats-officedocument.presentationml.presentation"
        ),
        # Text
        ".txt": "text/plain",
        ".html": "text/html",
        ".htm": "text/html",
        ".css": "text/css",
        ".js": "text/javascript",
        ".mjs": "text/javascript",
        ".json": "application/json",
        ".xml": "application/xml",
        ".csv": "text/csv",
        ".md": "text/markdown",
        # Archives
        ".zip": "application/zip",
        ".tar": "application/x-tar",
        ".gz": "application/gzip",
        ".7z": "application/x-7z-compressed",
        ".rar": "application/vnd.rar",
        # Audio
        ".mp3": "audio/mpeg",
        ".wav": "audio/wav",
        ".ogg": "audio/ogg",
        ".m4a": "audio/mp4",
        ".flac": "audio/flac",
        # Video
        ".mp4": "video/mp4",
        ".avi": "video/x-msvideo",
        ".mov": "video/quicktime",
        ".wmv": "video/x-ms-wmv",
        ".webm": "video/webm",
        ".mkv": "video/x-matroska",
        # Code
        ".ts": "text/typescript",
        ".tsx": "text/typescript",
        ".py": "text/x-python",
        ".java": "text/x-java",
        ".c": "text/x-c",
        ".cpp": "text/x-c++",
        ".rs": "text/x-rust",
        ".go": "text/x-go",
    }
)

CONTENT_MIME_TABLE: Mapping[str, str] = MappingProxyType(
    {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".webp": "image/webp",
        ".pdf": "application/pdf",
        ".txt": "text/plain",
        ".json": "application/json",
        ".xml": "application/xml",
        ".zip": "application/zip",
        ".mp3": "audio/mpeg",
        ".mp4": "video/mp4",
        ".wav": "audio/wav",
    }
)


class MimeResolver:
    """Look up a MIME type by filename suffix, with a fixed fallback."""

    def __init__(self, table: Mapping[str, str], default: str) -> None:
        self._table = table
        self._default = default

    def resolve(self, filename_or_path: str, explicit_type: str | None = None) -> str:
        """Return ``explicit_type`` when given, else the table entry or default."""
        if explicit_type:
            return explicit_type
        suffix = PurePosixPath(filename_or_path).suffix.lower()
        return self._table.get(suffix, self._default)


PATH_MIME_RESOLVER = MimeResolver(PATH_MIME_TABLE, PATH_DEFAULT_MIME_TYPE)
CONTENT_MIME_RESOLVER = MimeResolver(CONTENT_MIME_TABLE, CONTENT_DEFAULT_MIME_TYPE)

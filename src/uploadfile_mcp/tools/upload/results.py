"""Result records returned by the upload tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PathUploadResult:
    """Outcome of publishing a file read from a local path."""

    file_path: str
    folder_id: str
    original_filename: str
    content_type: str
    remote_path: str
    url: str
    success: bool = True

    @property
    def message(self) -> str:
        return f"File uploaded successfully to {self.url}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "file_path": self.file_path,
            "folder_id": self.folder_id,
            "original_filename": self.original_filename,
            "content_type": self.content_type,
            "remote_path": self.remote_path,
            "url": self.url,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class ContentUploadResult:
    """Outcome of publishing inline base64 content."""

    filename: str
    folder_id: str
    mime_type: str
    remote_path: str
    url: str
    content_size: int
    success: bool = True

    @property
    def message(self) -> str:
        return f"File content uploaded successfully to {self.url}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "filename": self.filename,
            "folder_id": self.folder_id,
            "mime_type": self.mime_type,
            "remote_path": self.remote_path,
            "url": self.url,
            "content_size": self.content_size,
            "message": self.message,
        }

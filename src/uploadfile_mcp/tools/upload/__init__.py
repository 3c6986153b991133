"""Upload tools package."""

from uploadfile_mcp.tools.upload.content_tool import (
    ContentUploader,
    UploadFileContentTool,
)
from uploadfile_mcp.tools.upload.mime import (
    CONTENT_MIME_RESOLVER,
    PATH_MIME_RESOLVER,
    MimeResolver,
)
from uploadfile_mcp.tools.upload.path_tool import PathUploader, UploadFileTool
from uploadfile_mcp.tools.upload.results import ContentUploadResult, PathUploadResult

__all__ = [
    # Path uploads
    "PathUploader",
    "UploadFileTool",
    "PathUploadResult",
    # Inline content uploads
    "ContentUploader",
    "UploadFileContentTool",
    "ContentUploadResult",
    # MIME detection
    "MimeResolver",
    "PATH_MIME_RESOLVER",
    "CONTENT_MIME_RESOLVER",
]

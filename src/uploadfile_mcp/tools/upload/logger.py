"""Logging for the upload tools.

Keeps log formatting out of the upload pipeline itself.
"""

from __future__ import annotations

from pathlib import Path

import loguru
from loguru import logger

from uploadfile_mcp.adapters.storage.http_put import DestinationKey


class UploadLogger:
    """Handles all logging for the upload pipeline."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        self._logger = logger_instance

    def upload_started(self, tool: str, key: DestinationKey) -> None:
        """Log the start of an upload."""
        self._logger.bind(tool=tool, folder_id=key.folder_id).info(
            "{}: uploading {}", tool, key.remote_path
        )

    def staged(self, path: Path, size: int) -> None:
        """Log decoded bytes written to a staging file."""
        self._logger.bind(staged_path=str(path), size=size).debug(
            "Staged {} bytes at {}", size, path
        )

    def transfer_started(self, key: DestinationKey, content_type: str) -> None:
        """Log the outbound PUT."""
        self._logger.bind(
            remote_path=key.remote_path, content_type=content_type
        ).debug("PUT {} ({})", key.remote_path, content_type)

    def transfer_failed(
        self, key: DestinationKey, exit_status: int, diagnostics: str
    ) -> None:
        """Log a failed PUT."""
        self._logger.bind(remote_path=key.remote_path, exit_status=exit_status).error(
            "Upload of {} failed (exit {}): {}",
            key.remote_path,
            exit_status,
            diagnostics,
        )

    def upload_completed(self, url: str) -> None:
        """Log a published object."""
        self._logger.bind(url=url).info("Uploaded object: {}", url)

    def cleanup_failed(self, path: Path, error: OSError) -> None:
        """Log a staging file that could not be removed."""
        self._logger.bind(staged_path=str(path)).warning(
            "Warning: Failed to clean up temporary file {}: {}", path, error
        )

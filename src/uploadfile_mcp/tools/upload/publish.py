"""Single-shot transfer shared by both upload tools."""

from __future__ import annotations

from pathlib import Path

from uploadfile_mcp.adapters.storage.http_put import DestinationKey, Transfer
from uploadfile_mcp.errors import TransferFailedError
from uploadfile_mcp.tools.upload.logger import UploadLogger


async def publish(
    transfer: Transfer,
    source: Path,
    key: DestinationKey,
    content_type: str,
    upload_logger: UploadLogger,
) -> str:
    """PUT ``source`` under ``key`` and return its public URL.

    Raises:
        TransferFailedError: If the transfer reports a non-zero exit status.
    """
    upload_logger.transfer_started(key, content_type)
    outcome = await transfer.send(source, key, content_type)
    if not outcome.ok:
        upload_logger.transfer_failed(
            key, outcome.exit_status, outcome.diagnostic_output
        )
        raise TransferFailedError(f"Upload failed: {outcome.diagnostic_output}")

    url = transfer.url_for(key)
    upload_logger.upload_completed(url)
    return url

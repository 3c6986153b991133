"""Per-call staging files for decoded upload content."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from uploadfile_mcp.adapters.storage.http_put import DestinationKey
from uploadfile_mcp.tools.upload.logger import UploadLogger


def staging_path(directory: Path, key: DestinationKey) -> Path:
    """Return ``<directory>/<folder_id>_<filename>`` for ``key``."""
    return directory / f"{key.folder_id}_{key.filename}"


@contextmanager
def staged_file(
    directory: Path,
    key: DestinationKey,
    data: bytes,
    upload_logger: UploadLogger | None = None,
) -> Iterator[Path]:
    """Write ``data`` to a staging file and remove it on exit.

    Removal runs on every exit path. A failed removal is logged as a
    warning and never replaces the exception (or result) of the body.
    """
    upload_logger = upload_logger or UploadLogger()
    path = staging_path(directory, key)
    try:
        path.write_bytes(data)
        upload_logger.staged(path, len(data))
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            upload_logger.cleanup_failed(path, exc)

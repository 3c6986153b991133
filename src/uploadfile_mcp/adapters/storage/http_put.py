"""Public object storage adapter (plain HTTP PUT via curl)."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Protocol
import uuid

from loguru import logger

from uploadfile_mcp.config import DEFAULT_CURL_BINARY, StorageConfig

# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DestinationKey:
    """Remote object key: a random folder plus the original filename."""

    folder_id: str
    filename: str

    @property
    def remote_path(self) -> str:
        return f"{self.folder_id}/{self.filename}"


@dataclass(frozen=True, slots=True)
class TransferOutcome:
    """Exit status and captured diagnostics of a single PUT."""

    exit_status: int
    diagnostic_output: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_status == 0


class Transfer(Protocol):
    """Capability that publishes one local file under a destination key."""

    def url_for(self, key: DestinationKey) -> str:
        """Public URL the object will be reachable at."""
        ...

    async def send(
        self, source: Path, key: DestinationKey, content_type: str
    ) -> TransferOutcome:
        """Issue exactly one PUT of ``source`` and report its outcome."""
        ...


# ---------------------------------------------------------------------------
# Key helpers
# ---------------------------------------------------------------------------


def make_destination_key(
    filename: str, *, folder_id: str | None = None
) -> DestinationKey:
    """Build a destination key for ``filename``.

    Directory components are stripped so only the base name is kept.

    Args:
        filename: File name or path of the file being published.
        folder_id: Folder identifier; a fresh uuid4 if *None*.

    Returns:
        DestinationKey for the upload.
    """
    if folder_id is None:
        folder_id = str(uuid.uuid4())
    filename = PurePosixPath(filename).name
    return DestinationKey(folder_id=folder_id, filename=filename)


# ---------------------------------------------------------------------------
# Upload
# ---------------------------------------------------------------------------


class CurlTransfer:
    """Transfer that shells out to ``curl`` in fail-on-HTTP-error mode."""

    def __init__(
        self, config: StorageConfig, *, curl_binary: str = DEFAULT_CURL_BINARY
    ) -> None:
        self._config = config
        self._curl_binary = curl_binary

    def url_for(self, key: DestinationKey) -> str:
        return self._config.object_url(key.remote_path)

    def build_command(
        self, source: Path, key: DestinationKey, content_type: str
    ) -> list[str]:
        return [
            self._curl_binary,
            "-X",
            "PUT",
            self.url_for(key),
            "-T",
            str(source),
            "-H",
            f"Content-Type: {content_type}",
            "--silent",
            "--show-error",
            "--fail",
        ]

    async def send(
        self, source: Path, key: DestinationKey, content_type: str
    ) -> TransferOutcome:
        """PUT ``source`` to the storage origin.

        Raises:
            OSError: If the curl binary cannot be started.
        """
        command = self.build_command(source, key, content_type)
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        exit_status = process.returncode if process.returncode is not None else -1

        diagnostics = stderr.decode("utf-8", errors="replace").strip()
        if not diagnostics:
            diagnostics = stdout.decode("utf-8", errors="replace").strip()

        logger.bind(remote_path=key.remote_path, exit_status=exit_status).debug(
            "curl PUT finished with exit status {}", exit_status
        )
        return TransferOutcome(exit_status=exit_status, diagnostic_output=diagnostics)

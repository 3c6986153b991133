"""Object storage adapters."""

from __future__ import annotations

from uploadfile_mcp.adapters.storage.http_put import (
    CurlTransfer,
    DestinationKey,
    Transfer,
    TransferOutcome,
    make_destination_key,
)

__all__ = [
    "CurlTransfer",
    "DestinationKey",
    "Transfer",
    "TransferOutcome",
    "make_destination_key",
]

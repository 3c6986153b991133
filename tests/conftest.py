"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from uploadfile_mcp.adapters.storage.http_put import DestinationKey, TransferOutcome
from uploadfile_mcp.config import StorageConfig, UploadSettings

ORIGIN = "https://s3.reily.app"


@dataclass
class SentObject:
    """What a fake transfer saw for one PUT."""

    source: Path
    key: DestinationKey
    content_type: str
    body: bytes
    source_existed: bool


@dataclass
class FakeTransfer:
    """Transfer double recording every PUT instead of touching the network."""

    config: StorageConfig = field(default_factory=StorageConfig)
    outcome: TransferOutcome = field(default_factory=lambda: TransferOutcome(0))
    error: Exception | None = None
    sent: list[SentObject] = field(default_factory=list)

    def url_for(self, key: DestinationKey) -> str:
        return self.config.object_url(key.remote_path)

    async def send(
        self, source: Path, key: DestinationKey, content_type: str
    ) -> TransferOutcome:
        existed = source.is_file()
        self.sent.append(
            SentObject(
                source=source,
                key=key,
                content_type=content_type,
                body=source.read_bytes() if existed else b"",
                source_existed=existed,
            )
        )
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def fake_transfer() -> FakeTransfer:
    return FakeTransfer()


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "staging"
    directory.mkdir()
    return directory


@pytest.fixture
def settings(staging_dir: Path) -> UploadSettings:
    return UploadSettings(storage=StorageConfig(), staging_dir=staging_dir)

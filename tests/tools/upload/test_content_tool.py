"""Tests for the inline content upload tool."""

from __future__ import annotations

import asyncio
import base64
import binascii
from pathlib import Path
from unittest.mock import patch
import uuid

from loguru import logger
import pytest

from uploadfile_mcp.adapters.storage.http_put import TransferOutcome
from uploadfile_mcp.errors import (
    InvalidParamsError,
    TransferFailedError,
    UploadInternalError,
)
from uploadfile_mcp.tools.upload.content_tool import (
    ContentUploader,
    UploadFileContentTool,
    decode_base64,
    looks_like_base64,
    split_data_url,
)

# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------


class TestSplitDataUrl:
    def test_extracts_mime_and_payload(self):
        assert split_data_url("data:image/png;base64,iVBORw0KGgo=") == (
            "image/png",
            "iVBORw0KGgo=",
        )

    def test_plain_content_untouched(self):
        assert split_data_url("aGVsbG8=") == (None, "aGVsbG8=")

    def test_non_base64_data_url_untouched(self):
        content = "data:text/plain,hello"

        assert split_data_url(content) == (None, content)


class TestLooksLikeBase64:
    @pytest.mark.parametrize(
        "content", ["aGVsbG8=", "aGVsbG8", "aGVs\nbG8=", "aGk=", "", "QQ=="]
    )
    def test_accepts_valid(self, content):
        assert looks_like_base64(content)

    @pytest.mark.parametrize("content", ["!!!not-base64!!!", "aGVsbG8=x", "a", "ab=c"])
    def test_rejects_invalid(self, content):
        assert not looks_like_base64(content)

    def test_only_checks_leading_characters(self):
        content = base64.b64encode(b"x" * 300).decode() + "!!!"

        assert looks_like_base64(content)


class TestDecodeBase64:
    def test_decodes_with_missing_padding(self):
        assert decode_base64("aGVsbG8") == b"hello"

    def test_ignores_whitespace(self):
        assert decode_base64("aGVs\r\nbG8=\n") == b"hello"

    def test_drops_stray_trailing_character(self):
        assert decode_base64("aGVsbG8Q") == b"hello"


# ---------------------------------------------------------------------------
# Uploader
# ---------------------------------------------------------------------------


class TestContentUploader:
    def test_hello_txt(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(uploader.upload("aGVsbG8=", "hello.txt"))

        uuid.UUID(result.folder_id)
        assert result.filename == "hello.txt"
        assert result.mime_type == "text/plain"
        assert result.content_size == 5
        assert result.remote_path == f"{result.folder_id}/hello.txt"
        assert result.url == (
            f"https://s3.reily.app/public/{result.folder_id}/hello.txt"
        )
        assert result.message == (
            f"File content uploaded successfully to {result.url}"
        )
        assert fake_transfer.sent[0].body == b"hello"

    def test_round_trips_arbitrary_bytes(self, fake_transfer, staging_dir):
        original = bytes(range(256)) * 3
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(
            uploader.upload(base64.b64encode(original).decode(), "blob.bin")
        )

        assert result.content_size == len(original)
        assert fake_transfer.sent[0].body == original

    def test_stages_under_folder_id(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(uploader.upload("aGVsbG8=", "dir/hello.txt"))

        sent = fake_transfer.sent[0]
        assert sent.source_existed
        assert sent.source == staging_dir / f"{result.folder_id}_hello.txt"
        assert result.filename == "hello.txt"

    def test_staged_file_removed_after_success(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        asyncio.run(uploader.upload("aGVsbG8=", "hello.txt"))

        assert not fake_transfer.sent[0].source.exists()
        assert list(staging_dir.iterdir()) == []

    def test_staged_file_removed_after_transfer_failure(
        self, fake_transfer, staging_dir
    ):
        fake_transfer.outcome = TransferOutcome(
            exit_status=22, diagnostic_output="returned error: 500"
        )
        uploader = ContentUploader(fake_transfer, staging_dir)

        with pytest.raises(TransferFailedError, match="Upload failed: returned error"):
            asyncio.run(uploader.upload("aGVsbG8=", "hello.txt"))

        assert list(staging_dir.iterdir()) == []

    def test_staged_file_removed_after_transfer_exception(
        self, fake_transfer, staging_dir
    ):
        fake_transfer.error = OSError("network unreachable")
        uploader = ContentUploader(fake_transfer, staging_dir)

        with pytest.raises(OSError, match="network unreachable"):
            asyncio.run(uploader.upload("aGVsbG8=", "hello.txt"))

        assert list(staging_dir.iterdir()) == []

    def test_malformed_base64_creates_no_file(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        with pytest.raises(InvalidParamsError, match="Invalid base64 content"):
            asyncio.run(uploader.upload("!!!not-base64!!!", "hello.txt"))

        assert list(staging_dir.iterdir()) == []
        assert fake_transfer.sent == []

    @pytest.mark.parametrize(
        ("content", "filename"), [("", "hello.txt"), ("aGVsbG8=", "")]
    )
    def test_missing_arguments(self, fake_transfer, staging_dir, content, filename):
        uploader = ContentUploader(fake_transfer, staging_dir)

        with pytest.raises(
            InvalidParamsError, match="content and filename are required"
        ):
            asyncio.run(uploader.upload(content, filename))


class TestContentMimePrecedence:
    def test_explicit_beats_data_url(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(
            uploader.upload("data:image/gif;base64,aGVsbG8=", "a.png", "text/x-custom")
        )

        assert result.mime_type == "text/x-custom"
        assert fake_transfer.sent[0].content_type == "text/x-custom"

    def test_data_url_beats_extension(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(
            uploader.upload("data:image/gif;base64,aGVsbG8=", "a.png")
        )

        assert result.mime_type == "image/gif"
        assert result.content_size == 5

    def test_extension_beats_default(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(uploader.upload("aGVsbG8=", "a.png"))

        assert result.mime_type == "image/png"

    def test_default_is_octet_stream(self, fake_transfer, staging_dir):
        uploader = ContentUploader(fake_transfer, staging_dir)

        result = asyncio.run(uploader.upload("aGVsbG8=", "a.unknown"))

        assert result.mime_type == "application/octet-stream"


# ---------------------------------------------------------------------------
# Tool wrapper
# ---------------------------------------------------------------------------


class TestUploadFileContentTool:
    def test_execute_returns_result_dict(self, fake_transfer, staging_dir):
        tool = UploadFileContentTool(ContentUploader(fake_transfer, staging_dir))

        result = asyncio.run(
            tool.execute_async(content="aGVsbG8=", filename="hello.txt")
        )

        assert result["success"] is True
        assert result["content_size"] == 5
        assert result["mime_type"] == "text/plain"
        assert list(result) == [
            "success",
            "filename",
            "folder_id",
            "mime_type",
            "remote_path",
            "url",
            "content_size",
            "message",
        ]

    def test_unexpected_error_becomes_internal_error(
        self, fake_transfer, staging_dir: Path
    ):
        fake_transfer.error = RuntimeError("curl crashed")
        tool = UploadFileContentTool(ContentUploader(fake_transfer, staging_dir))

        with pytest.raises(UploadInternalError) as exc_info:
            asyncio.run(tool.execute_async(content="aGVsbG8=", filename="hello.txt"))

        assert exc_info.value.message == (
            "Failed to upload file content: curl crashed"
        )
        assert list(staging_dir.iterdir()) == []

    def test_invalid_params_pass_through(self, fake_transfer, staging_dir):
        tool = UploadFileContentTool(ContentUploader(fake_transfer, staging_dir))

        with pytest.raises(InvalidParamsError):
            asyncio.run(tool.execute_async(content="!!!not-base64!!!", filename="a"))

    def test_stray_character_past_checked_prefix(self, fake_transfer, staging_dir):
        original = b"x" * 78
        content = base64.b64encode(original).decode() + "Q"
        tool = UploadFileContentTool(ContentUploader(fake_transfer, staging_dir))

        result = asyncio.run(tool.execute_async(content=content, filename="x.bin"))

        assert len(content) == 105
        assert result["content_size"] == 78
        assert fake_transfer.sent[0].body == original

    def test_decode_failure_becomes_internal_error(self, fake_transfer, staging_dir):
        tool = UploadFileContentTool(ContentUploader(fake_transfer, staging_dir))

        with patch(
            "uploadfile_mcp.tools.upload.content_tool.decode_base64",
            side_effect=binascii.Error("Incorrect padding"),
        ):
            with pytest.raises(UploadInternalError) as exc_info:
                asyncio.run(
                    tool.execute_async(content="aGVsbG8=", filename="hello.txt")
                )

        assert exc_info.value.message == (
            "Failed to upload file content: Incorrect padding"
        )
        assert list(staging_dir.iterdir()) == []
        assert fake_transfer.sent == []


class TestCleanupWarning:
    def test_failed_cleanup_is_logged_and_upload_succeeds(
        self, fake_transfer, staging_dir
    ):
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        uploader = ContentUploader(fake_transfer, staging_dir)

        try:
            with patch.object(Path, "unlink", side_effect=PermissionError("busy")):
                result = asyncio.run(uploader.upload("aGVsbG8=", "hello.txt"))
        finally:
            logger.remove(handler_id)

        staged = staging_dir / f"{result.folder_id}_hello.txt"
        assert result.content_size == 5
        assert len(messages) == 1
        assert "Failed to clean up temporary file" in messages[0]
        assert str(staged) in messages[0]
        assert "busy" in messages[0]

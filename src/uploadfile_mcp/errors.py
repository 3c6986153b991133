"""Typed failures surfaced by the upload tools."""

from __future__ import annotations

from typing import ClassVar

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class UploadError(Exception):
    """Base error for upload operations.

    Every failure leaving a tool is an ``UploadError``; the server turns it
    into a JSON-RPC error with ``code`` and the exception message.
    """

    code: ClassVar[int] = INTERNAL_ERROR
    kind: ClassVar[str] = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_error_data(self) -> ErrorData:
        return ErrorData(code=self.code, message=self.message)


class InvalidParamsError(UploadError):
    """Missing argument, missing file or malformed base64 content."""

    code = INVALID_PARAMS
    kind = "invalid_params"


class TransferFailedError(UploadError):
    """The outbound PUT exited non-zero or got a non-2xx response."""

    kind = "transfer_failed"


class UploadInternalError(UploadError):
    """Unexpected failure while decoding, staging or assembling a result."""

    kind = "internal_error"


class UnknownToolError(UploadError):
    """No tool is registered under the requested name."""

    code = METHOD_NOT_FOUND
    kind = "method_not_found"

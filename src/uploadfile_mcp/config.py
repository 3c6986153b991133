"""Runtime configuration for the upload server."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import tempfile

DEFAULT_STORAGE_ORIGIN = "https://s3.reily.app"
DEFAULT_BUCKET_PREFIX = "public"
DEFAULT_CURL_BINARY = "curl"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """Invalid upload server configuration."""


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Fixed destination of every upload: origin plus bucket path prefix."""

    origin: str = DEFAULT_STORAGE_ORIGIN
    bucket_prefix: str = DEFAULT_BUCKET_PREFIX

    def object_url(self, remote_path: str) -> str:
        return f"{self.origin}/{self.bucket_prefix}/{remote_path}"


@dataclass(frozen=True, slots=True)
class UploadSettings:
    """Process-wide settings loaded once at server startup."""

    storage: StorageConfig
    staging_dir: Path
    curl_binary: str = DEFAULT_CURL_BINARY
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings_from_env() -> UploadSettings:
    """Load upload settings from environment variables.

    Optional env vars: UPLOADFILE_STORAGE_ORIGIN, UPLOADFILE_BUCKET_PREFIX,
    UPLOADFILE_STAGING_DIR, UPLOADFILE_CURL_BINARY, UPLOADFILE_LOG_LEVEL.

    Raises:
        ConfigError: If a value is malformed.
    """
    origin = os.environ.get("UPLOADFILE_STORAGE_ORIGIN", "").strip()
    origin = (origin or DEFAULT_STORAGE_ORIGIN).rstrip("/")
    if not origin.startswith(("http://", "https://")):
        raise ConfigError(
            "UPLOADFILE_STORAGE_ORIGIN must start with http:// or https://"
        )

    bucket_prefix = os.environ.get("UPLOADFILE_BUCKET_PREFIX", "").strip().strip("/")
    if not bucket_prefix:
        bucket_prefix = DEFAULT_BUCKET_PREFIX

    staging_raw = os.environ.get("UPLOADFILE_STAGING_DIR", "").strip()
    staging_dir = Path(staging_raw) if staging_raw else Path(tempfile.gettempdir())
    if not staging_dir.is_dir():
        raise ConfigError(f"UPLOADFILE_STAGING_DIR is not a directory: {staging_dir}")

    curl_binary = (
        os.environ.get("UPLOADFILE_CURL_BINARY", "").strip() or DEFAULT_CURL_BINARY
    )

    log_level = os.environ.get("UPLOADFILE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    log_level = log_level.strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"UPLOADFILE_LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}"
        )

    return UploadSettings(
        storage=StorageConfig(origin=origin, bucket_prefix=bucket_prefix),
        staging_dir=staging_dir,
        curl_binary=curl_binary,
        log_level=log_level,
    )

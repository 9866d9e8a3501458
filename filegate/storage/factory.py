"""Factory for building storage instances from configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from minio import Minio

from filegate.core.config import Settings, settings as default_settings
from filegate.storage.minio_impl import MinioStorage


def _normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    Returns:
        Tuple of (host:port, secure_flag)
    """
    parsed = urlparse(endpoint)
    secure = parsed.scheme == "https"
    host = parsed.netloc or parsed.path.rstrip("/")
    return host, secure


def build_storage(config: Settings | None = None) -> MinioStorage:
    """Build a MinioStorage from settings.

    No network call is made here; bucket creation is left to the caller.
    """
    config = config or default_settings
    host, secure = _normalize_endpoint(config.S3_ENDPOINT)
    client = Minio(
        endpoint=host,
        access_key=config.S3_ACCESS_KEY,
        secret_key=config.S3_SECRET_KEY,
        secure=secure,
    )
    return MinioStorage(client)


__all__ = ["build_storage"]

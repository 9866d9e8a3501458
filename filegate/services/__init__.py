"""Business logic services."""

from filegate.services.content_types import resolve_content_type
from filegate.services.gateway import (
    DownloadedFile,
    FileGateway,
    GatewayError,
    StoreListError,
    StoreReadError,
    StoreWriteError,
)
from filegate.services.naming import generate_key

__all__ = [
    "DownloadedFile",
    "FileGateway",
    "GatewayError",
    "StoreListError",
    "StoreReadError",
    "StoreWriteError",
    "generate_key",
    "resolve_content_type",
]

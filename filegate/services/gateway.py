"""Upload, list and download orchestration over an object store.

The gateway is stateless: it holds the storage handle, the bucket name and the
public URL prefix, all fixed at construction. Store-specific exceptions never
escape; callers see the ``GatewayError`` family or a ``None`` for a missing key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from filegate.services.content_types import resolve_content_type
from filegate.services.naming import generate_key
from filegate.storage.contracts import ObjectNotFoundError, ObjectStorage

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for store failures surfaced by the gateway."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(cause)


class StoreWriteError(GatewayError):
    """The store rejected or failed an upload."""

    pass


class StoreReadError(GatewayError):
    """The store failed a download for a reason other than a missing key."""

    pass


class StoreListError(GatewayError):
    """The store failed to enumerate the bucket."""

    pass


@dataclass(frozen=True, slots=True)
class DownloadedFile:
    """Bytes of a stored object plus the content type to serve them with."""

    key: str
    data: bytes
    content_type: str


class FileGateway:
    """Maps upload/list/download onto a single bucket."""

    def __init__(self, storage: ObjectStorage, bucket: str, public_url_prefix: str):
        self.storage = storage
        self.bucket = bucket
        self.public_url_prefix = public_url_prefix.rstrip("/")

    def upload(self, original_filename: str, content_type: str | None, data: bytes) -> str:
        """Store ``data`` under a freshly generated key and return the key.

        Raises:
            StoreWriteError: The store write failed. No retry or cleanup is attempted.
        """
        key = generate_key(original_filename)
        try:
            self.storage.put_bytes(self.bucket, key, data, content_type=content_type or None)
        except Exception as e:
            logger.error("Upload of %s as %s failed: %s", original_filename, key, e, exc_info=True)
            raise StoreWriteError(str(e)) from e

        logger.info("Uploaded %s (%d bytes) as %s", original_filename, len(data), key)
        return key

    def list_all(self) -> list[str]:
        """Return the public URL of every object in the bucket.

        Raises:
            StoreListError: Enumeration failed; no partial list is returned.
        """
        try:
            keys = self.storage.list_keys(self.bucket)
        except Exception as e:
            logger.error("Listing bucket %s failed: %s", self.bucket, e, exc_info=True)
            raise StoreListError(str(e)) from e

        return [self.public_url(key) for key in keys]

    def download(self, key: str) -> DownloadedFile | None:
        """Fetch an object by key, or ``None`` when the key does not exist.

        The content type is derived from the key's extension, not from the
        type declared at upload.

        Raises:
            StoreReadError: Any store failure other than a missing key.
        """
        try:
            data = self.storage.get_bytes(self.bucket, key)
        except ObjectNotFoundError:
            logger.info("Object %s not found in bucket %s", key, self.bucket)
            return None
        except Exception as e:
            logger.error("Download of %s failed: %s", key, e, exc_info=True)
            raise StoreReadError(str(e)) from e

        return DownloadedFile(key=key, data=data, content_type=resolve_content_type(key))

    def public_url(self, key: str) -> str:
        return f"{self.public_url_prefix}/{key}"


__all__ = [
    "DownloadedFile",
    "FileGateway",
    "GatewayError",
    "StoreListError",
    "StoreReadError",
    "StoreWriteError",
]

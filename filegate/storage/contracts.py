"""Storage interfaces and error types."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class StorageError(Exception):
    """Wraps underlying storage exceptions with operation context."""

    def __init__(self, op: str, bucket: str | None, key: str | None, message: str):
        self.op = op
        self.bucket = bucket
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        bucket_repr = self.bucket or "<unknown>"
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for bucket={bucket_repr} key={key_repr}: {self.message}"


class ObjectNotFoundError(StorageError):
    """Raised by ``get_bytes`` when the requested key does not exist."""


@runtime_checkable
class ObjectStorage(Protocol):
    """Contract for object storage implementations."""

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
    ) -> None:
        ...

    def get_bytes(self, bucket: str, key: str) -> bytes:
        ...

    def list_keys(self, bucket: str) -> list[str]:
        ...

    def bucket_exists(self, name: str) -> bool:
        ...

    def ensure_bucket(self, name: str) -> None:
        ...


__all__ = ["StorageError", "ObjectNotFoundError", "ObjectStorage"]

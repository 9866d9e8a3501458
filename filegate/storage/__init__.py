"""Storage package: object storage abstraction."""

from filegate.storage.contracts import ObjectNotFoundError, ObjectStorage, StorageError
from filegate.storage.minio_impl import MinioStorage

__all__ = ["ObjectNotFoundError", "ObjectStorage", "StorageError", "MinioStorage"]

"""MinIO-backed implementation of the storage interface."""

from __future__ import annotations

import io

from minio import Minio
from minio.error import S3Error

from filegate.storage.contracts import ObjectNotFoundError, ObjectStorage, StorageError

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# S3 error codes that mean "no object under this key"
_NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchObject", "ResourceNotFound"})


def _wrap_error(op: str, bucket: str | None, key: str | None, exc: Exception) -> StorageError:
    return StorageError(op=op, bucket=bucket, key=key, message=str(exc))


class MinioStorage(ObjectStorage):
    """Object storage abstraction backed by MinIO SDK."""

    def __init__(self, client: Minio):
        self._client = client

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
    ) -> None:
        try:
            # MinIO requires a file-like object with read() method
            self._client.put_object(
                bucket_name=bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type or DEFAULT_CONTENT_TYPE,
            )
        except Exception as exc:
            raise _wrap_error("put", bucket, key, exc) from exc

    def get_bytes(self, bucket: str, key: str) -> bytes:
        try:
            obj = self._client.get_object(bucket_name=bucket, object_name=key)
            try:
                return obj.read()
            finally:
                obj.close()
                obj.release_conn()
        except S3Error as exc:
            if exc.code in _NOT_FOUND_CODES:
                raise ObjectNotFoundError("get", bucket, key, str(exc)) from exc
            raise _wrap_error("get", bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("get", bucket, key, exc) from exc

    def list_keys(self, bucket: str) -> list[str]:
        # list_objects pages lazily; drain it inside the try
        try:
            return [
                obj.object_name
                for obj in self._client.list_objects(bucket_name=bucket, recursive=True)
            ]
        except Exception as exc:
            raise _wrap_error("list", bucket, None, exc) from exc

    def bucket_exists(self, name: str) -> bool:
        try:
            return self._client.bucket_exists(bucket_name=name)
        except Exception as exc:
            raise _wrap_error("bucket_exists", name, None, exc) from exc

    def ensure_bucket(self, name: str) -> None:
        try:
            if not self._client.bucket_exists(bucket_name=name):
                self._client.make_bucket(bucket_name=name)
        except Exception as exc:
            raise _wrap_error("ensure_bucket", name, None, exc) from exc


__all__ = ["MinioStorage"]

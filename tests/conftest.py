"""Pytest configuration and fixtures."""

import os

# Configure settings BEFORE any filegate imports
os.environ["S3_ENSURE_BUCKET"] = "false"
os.environ["S3_BUCKET"] = "uploads"
os.environ["PUBLIC_URL_PREFIX"] = "https://files.example.com/uploads"

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from filegate.deps import get_gateway
from filegate.main import app
from filegate.services.gateway import FileGateway
from filegate.storage.contracts import ObjectNotFoundError

PREFIX = "https://files.example.com/uploads"


class InMemoryStorage:
    """ObjectStorage fake keeping objects in a dict per bucket."""

    def __init__(self):
        self.buckets: dict[str, dict[str, tuple[bytes, str | None]]] = {}

    def put_bytes(self, bucket, key, data, *, content_type=None):
        self.buckets.setdefault(bucket, {})[key] = (bytes(data), content_type)

    def get_bytes(self, bucket, key):
        try:
            return self.buckets[bucket][key][0]
        except KeyError:
            raise ObjectNotFoundError("get", bucket, key, "NoSuchKey") from None

    def list_keys(self, bucket):
        return sorted(self.buckets.get(bucket, {}))

    def bucket_exists(self, name):
        return name in self.buckets

    def ensure_bucket(self, name):
        self.buckets.setdefault(name, {})


@pytest.fixture
def memory_storage():
    storage = InMemoryStorage()
    storage.ensure_bucket("uploads")
    return storage


@pytest.fixture
def gateway(memory_storage):
    return FileGateway(memory_storage, bucket="uploads", public_url_prefix=PREFIX)


@pytest.fixture
def mock_storage():
    """Create a mock storage client."""
    storage = MagicMock()
    storage.put_bytes = MagicMock(return_value=None)
    storage.get_bytes = MagicMock(return_value=b"test")
    storage.list_keys = MagicMock(return_value=[])
    return storage


@pytest.fixture
def client_for():
    """Build a TestClient whose routes use the given gateway."""
    clients = []

    def _make(gw):
        app.dependency_overrides[get_gateway] = lambda: gw
        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_for, gateway):
    return client_for(gateway)

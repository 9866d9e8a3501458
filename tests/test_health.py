"""Tests for health endpoints."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from filegate.main import app
from filegate.services.gateway import FileGateway
from filegate.storage.contracts import StorageError


def _gateway_with(storage):
    return FileGateway(storage, bucket="uploads", public_url_prefix="http://minio:9000/uploads")


class TestLivenessEndpoint:
    """Tests for /health liveness endpoint."""

    def test_health_check_returns_ok(self):
        """Liveness endpoint returns 200 with status ok."""
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/health")
            assert response.status_code == 200
            assert response.json() == {"status": "ok"}


class TestReadinessEndpoint:
    """Tests for /health/ready readiness endpoint."""

    def test_readiness_all_ok(self):
        """Readiness returns 200 when the bucket is reachable."""
        storage = MagicMock()
        storage.bucket_exists.return_value = True

        with TestClient(app, raise_server_exceptions=False) as client:
            app.state.gateway = _gateway_with(storage)

            response = client.get("/health/ready")

            assert response.status_code == 200
            assert response.json() == {"status": "ok", "checks": {"storage": "ok"}}
            storage.bucket_exists.assert_called_once_with("uploads")

    def test_readiness_bucket_missing(self):
        """Readiness returns 503 when the bucket does not exist."""
        storage = MagicMock()
        storage.bucket_exists.return_value = False

        with TestClient(app, raise_server_exceptions=False) as client:
            app.state.gateway = _gateway_with(storage)

            response = client.get("/health/ready")

            assert response.status_code == 503
            assert response.json()["status"] == "degraded"
            assert "missing" in response.json()["checks"]["storage"]

    def test_readiness_storage_failure(self):
        """Readiness returns 503 when storage is unreachable."""
        storage = MagicMock()
        storage.bucket_exists.side_effect = StorageError("bucket_exists", "uploads", None, "Connection refused")

        with TestClient(app, raise_server_exceptions=False) as client:
            app.state.gateway = _gateway_with(storage)

            response = client.get("/health/ready")

            assert response.status_code == 503
            assert "error" in response.json()["checks"]["storage"]

    def test_readiness_storage_not_configured(self):
        """Readiness returns 503 when no gateway was built."""
        with TestClient(app, raise_server_exceptions=False) as client:
            app.state.gateway = None

            response = client.get("/health/ready")

            assert response.status_code == 503
            assert response.json()["checks"]["storage"] == "not configured"


def test_lifespan_builds_gateway_from_settings():
    with TestClient(app, raise_server_exceptions=False):
        gateway = app.state.gateway
        assert isinstance(gateway, FileGateway)
        assert gateway.bucket == "uploads"
        assert gateway.public_url_prefix == "https://files.example.com/uploads"

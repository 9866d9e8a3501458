"""API schemas."""

from filegate.schemas.api import HealthResponse, UploadResponse

__all__ = ["HealthResponse", "UploadResponse"]

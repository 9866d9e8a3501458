"""API response models for file endpoints."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Body of both successful and failed upload responses."""

    message: str


class HealthResponse(BaseModel):
    """Readiness probe body."""

    status: str
    checks: dict[str, str] = {}

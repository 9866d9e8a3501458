"""Shared dependencies for FastAPI routes."""

from __future__ import annotations

from fastapi import HTTPException, Request

from filegate.services.gateway import FileGateway


def get_gateway(request: Request) -> FileGateway:
    """Return the gateway built during application startup.

    The gateway lives on ``app.state`` so each app instance owns its own
    storage client; tests swap it via ``app.dependency_overrides``.
    """
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise HTTPException(status_code=503, detail="Storage not configured")
    return gateway


__all__ = ["get_gateway"]

"""Health check endpoints."""

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from filegate.schemas.api import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe - checks that the bucket is reachable."""
    checks = {}
    all_ok = True

    gateway = getattr(request.app.state, "gateway", None)
    if gateway is not None:
        try:
            if await asyncio.to_thread(gateway.storage.bucket_exists, gateway.bucket):
                checks["storage"] = "ok"
            else:
                checks["storage"] = f"bucket {gateway.bucket} missing"
                all_ok = False
        except Exception as e:
            logger.warning("Storage readiness check failed: %s", e)
            checks["storage"] = f"error: {e}"
            all_ok = False
    else:
        checks["storage"] = "not configured"
        all_ok = False

    body = HealthResponse(status="ok" if all_ok else "degraded", checks=checks)
    return JSONResponse(status_code=200 if all_ok else 503, content=body.model_dump())

"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from filegate.core.config import settings
from filegate.core.logging import setup_logging
from filegate.routes import files_router, health_router
from filegate.services.gateway import FileGateway
from filegate.storage.factory import build_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the storage client and gateway on startup."""
    setup_logging()

    storage = build_storage(settings)

    # Bucket creation - tolerate failure, readiness reports it
    if settings.S3_ENSURE_BUCKET:
        try:
            storage.ensure_bucket(settings.S3_BUCKET)
            logger.info("Bucket %s ready at %s", settings.S3_BUCKET, settings.S3_ENDPOINT)
        except Exception as e:
            logger.warning("Failed to ensure bucket %s: %s", settings.S3_BUCKET, e)

    app.state.gateway = FileGateway(
        storage,
        bucket=settings.S3_BUCKET,
        public_url_prefix=settings.public_url_prefix(),
    )

    yield

    app.state.gateway = None


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Register routers
app.include_router(health_router)
app.include_router(files_router)

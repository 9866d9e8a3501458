"""API routes package."""

from filegate.routes.files import router as files_router
from filegate.routes.health import router as health_router

__all__ = ["files_router", "health_router"]

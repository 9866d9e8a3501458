"""Logging configuration."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the gateway process.

    The level comes from ``level`` or ``LOG_LEVEL`` (default ``INFO``).
    urllib3, which the MinIO SDK talks through, is kept at WARNING.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

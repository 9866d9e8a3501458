"""Download content-type inference from key extensions."""

from __future__ import annotations

from typing import Mapping

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: Mapping[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "pdf": "application/pdf",
    "txt": "text/plain",
}


def resolve_content_type(key: str) -> str:
    """Map the lowercase extension after the last dot to a MIME type.

    Unknown or missing extensions fall back to ``application/octet-stream``.
    Only the final suffix is considered, so ``archive.tar.gz`` looks up ``gz``.
    """
    _, dot, ext = key.rpartition(".")
    if not dot:
        return DEFAULT_CONTENT_TYPE
    return CONTENT_TYPES.get(ext.lower(), DEFAULT_CONTENT_TYPE)


__all__ = ["CONTENT_TYPES", "DEFAULT_CONTENT_TYPE", "resolve_content_type"]

"""File upload, listing and download endpoints."""

import asyncio
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.datastructures import UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from filegate.core.config import settings
from filegate.deps import get_gateway
from filegate.schemas.api import UploadResponse
from filegate.services.gateway import FileGateway, StoreListError, StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/files", tags=["files"])

GREETING = "Hello, File Upload Gateway!"


def _quoted_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _content_disposition(filename: str) -> str:
    """Build an attachment header; non-ASCII names also get an RFC 5987 ``filename*``."""
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
        return (
            f"attachment; filename={_quoted_string(fallback)}; "
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )
    return f"attachment; filename={_quoted_string(filename)}"


async def _read_file_field(request: Request) -> tuple[str, str | None, bytes]:
    """Return (filename, content_type, bytes) of the multipart ``file`` field.

    A part sent without a filename arrives as a plain string field; it is
    accepted with an empty filename.
    """
    async with request.form() as form:
        field = form.get("file")
        if field is None:
            raise HTTPException(status_code=422, detail="Missing multipart field 'file'")
        if isinstance(field, UploadFile):
            return field.filename or "", field.content_type, await field.read()
        return "", None, field.encode("utf-8")


@router.get("/hello", response_class=PlainTextResponse)
def hello():
    """Reachability check."""
    logger.info("Hello API called")
    return GREETING


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    request: Request,
    gateway: FileGateway = Depends(get_gateway),
):
    """Store the multipart ``file`` field under a new unique key."""
    filename, content_type, content = await _read_file_field(request)
    logger.info("File upload request received for file: %s", filename)

    max_bytes = settings.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.MAX_FILE_SIZE_MB}MB limit",
        )

    try:
        key = await asyncio.to_thread(gateway.upload, filename, content_type, content)
    except StoreWriteError as e:
        return JSONResponse(
            status_code=417,
            content=UploadResponse(
                message=f"Could not upload the file: {filename}! Error: {e.cause}"
            ).model_dump(),
        )

    return UploadResponse(message=f"Uploaded the file successfully: {key}")


@router.get("", response_model=list[str])
async def list_files(gateway: FileGateway = Depends(get_gateway)):
    """List public URLs of all stored files."""
    logger.info("Request received to list all files")
    try:
        urls = await asyncio.to_thread(gateway.list_all)
    except StoreListError as e:
        return JSONResponse(status_code=500, content=[f"Could not list files. Error: {e.cause}"])

    logger.info("Retrieved %d file URLs", len(urls))
    return urls


@router.get("/{filename}")
async def download_file(filename: str, gateway: FileGateway = Depends(get_gateway)):
    """Download a stored file by its key."""
    logger.info("Request received to download file: %s", filename)
    try:
        downloaded = await asyncio.to_thread(gateway.download, filename)
    except StoreReadError:
        return Response(status_code=500)

    if downloaded is None:
        logger.warning("File not found for download: %s", filename)
        return Response(status_code=404)

    return Response(
        content=downloaded.data,
        media_type=downloaded.content_type,
        headers={"Content-Disposition": _content_disposition(filename)},
    )

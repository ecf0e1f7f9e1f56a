"""
Student Council API — Upload Routes
=====================================

What:  POST /api/upload accepts up to 10 files in the multipart field
       `files`; GET /uploads/{filename} serves stored files back as raw bytes.

Request Flow (POST /api/upload):
    1. FastAPI parses multipart/form-data into UploadFile objects
    2. Each file is read into memory and closed
    3. UploadService checks count, size and type for the whole batch,
       then writes every file
    4. Response lists name, url, size and declared type per file

Step 1 runs before require_auth: FastAPI parses the multipart form before
resolving dependencies, so an unauthenticated request is spooled (bounded
by the size and count limits) before it is refused with 401.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import FileResponse

from council.schemas.common import ErrorResponse
from council.schemas.upload import UploadResponse
from council.security import Identity, require_auth
from council.services.upload_service import IncomingFile, UploadService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])


def get_upload_service(request: Request) -> UploadService:
    return request.app.state.upload_service


@router.post(
    "/api/upload",
    response_model=UploadResponse,
    responses={
        400: {"description": "No files, or too many files", "model": ErrorResponse},
        413: {"description": "A file exceeds the size limit", "model": ErrorResponse},
        415: {"description": "A file is neither a document nor an image", "model": ErrorResponse},
    },
    summary="Upload documents or images",
)
async def upload_files(
    files: List[UploadFile] = File(..., description="Up to 10 files, 10MB each"),
    identity: Identity = Depends(require_auth),
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    incoming: List[IncomingFile] = []
    for upload in files:
        try:
            content = await upload.read()
        finally:
            await upload.close()
        incoming.append(
            IncomingFile(
                filename=upload.filename or "upload",
                content_type=upload.content_type or "application/octet-stream",
                content=content,
            )
        )

    logger.info("Received %d file(s) from user %s", len(incoming), identity.id)
    stored = await upload_service.validate_and_store(incoming)
    return UploadResponse(files=stored)


@router.get(
    "/uploads/{filename}",
    summary="Download a stored upload",
    responses={
        200: {"description": "Raw file bytes"},
        404: {"description": "File not found", "model": ErrorResponse},
    },
)
async def serve_upload(
    filename: str,
    upload_service: UploadService = Depends(get_upload_service),
) -> FileResponse:
    path = upload_service.resolve_stored_file(filename)
    return FileResponse(path=str(path))

"""
Student Council API — Upload Service
======================================

What:  Filters, names and stores uploaded documents/images, and resolves
       stored names back to files for the /uploads/ static route.
How:   The whole batch is validated (count, per-file size, type filter)
       before the first byte is written, so a rejected request leaves
       nothing on disk. Files are written with aiofiles to avoid blocking the
       event loop.
Who:   Called by routes/uploads.py. One instance per application, built by
       create_app() from settings and kept on `app.state.upload_service`.

Type Filter:
    A file passes when its declared media type OR its extension contains one
    of: pdf, doc, docx, jpg, jpeg, png, txt (case-insensitive search).
    Either check alone is enough, so a spoofed extension or a spoofed
    Content-Type is accepted. See DESIGN.md before tightening it to AND.

Stored Names:
    <epoch ms>-<random 0..999999999><original extension>
    e.g. 1767225600000-482913377.pdf. No user input other than the
    extension reaches the file system.
"""

import logging
import os
import random
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import aiofiles

from council.exceptions import (
    FileStorageError,
    NotFoundError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from council.schemas.upload import UploadedFileDescriptor

logger = logging.getLogger(__name__)

ALLOWED_TYPES_PATTERN = re.compile(r"pdf|doc|docx|jpg|jpeg|png|txt")

UPLOADS_URL_PREFIX = "/uploads"


@dataclass
class IncomingFile:
    """One part of a multipart upload, already read into memory."""

    filename: str
    content_type: str
    content: bytes


def is_allowed_file(filename: str, content_type: Optional[str]) -> bool:
    """Apply the media-type-OR-extension filter to one file."""
    mime_ok = bool(ALLOWED_TYPES_PATTERN.search((content_type or "").lower()))
    ext_ok = bool(ALLOWED_TYPES_PATTERN.search(Path(filename).suffix.lower()))
    return mime_ok or ext_ok


class UploadService:
    """
    Manages the upload directory.

    Args:
        upload_dir: Directory receiving blobs; created if missing.
        max_file_size: Per-file byte limit.
        max_files: Files accepted in one request.
        clock: Source of the time component in stored names.
        rng: Source of the random component in stored names.
    """

    def __init__(
        self,
        upload_dir: str,
        max_file_size: int = 10 * 1024 * 1024,
        max_files: int = 10,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.upload_dir = Path(upload_dir).resolve()
        self.max_file_size = max_file_size
        self.max_files = max_files
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._rng = rng or random.Random()
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info("UploadService initialized with upload_dir=%s", self.upload_dir)

    # ── Validation ────────────────────────────────────────────────────────

    def validate_count(self, count: int) -> None:
        if count == 0:
            raise ValidationError(message="No files were uploaded", field="files")
        if count > self.max_files:
            raise ValidationError(
                message=f"Too many files. At most {self.max_files} files can be uploaded at once.",
                field="files",
                context={"max_files": self.max_files, "received": count},
            )

    def validate_size(self, incoming: IncomingFile) -> None:
        size = len(incoming.content)
        if size > self.max_file_size:
            max_mb = self.max_file_size / (1024 * 1024)
            raise PayloadTooLargeError(
                message=f"File '{incoming.filename}' exceeds the maximum of {max_mb:.0f}MB.",
                context={"filename": incoming.filename, "size": size, "max_size": self.max_file_size},
            )

    def validate_type(self, incoming: IncomingFile) -> None:
        if not is_allowed_file(incoming.filename, incoming.content_type):
            raise UnsupportedMediaTypeError(
                context={"filename": incoming.filename, "content_type": incoming.content_type},
            )

    # ── Storage ───────────────────────────────────────────────────────────

    def generate_name(self, original_name: str) -> str:
        millis = int(self._clock().timestamp() * 1000)
        suffix = self._rng.randrange(1_000_000_000)
        return f"{millis}-{suffix}{Path(original_name).suffix}"

    async def store_file(self, incoming: IncomingFile) -> UploadedFileDescriptor:
        """
        Write one validated file to disk.

        Raises:
            FileStorageError: The write failed (disk full, permissions, ...).
        """
        stored_name = self.generate_name(incoming.filename)
        path = self.upload_dir / stored_name
        try:
            async with aiofiles.open(path, "wb") as f:
                await f.write(incoming.content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded file. Please try again.",
                context={"path": str(path), "os_error": str(e)},
            )

        logger.info("File stored: %s (%d bytes)", stored_name, len(incoming.content))
        return UploadedFileDescriptor(
            name=incoming.filename,
            url=f"{UPLOADS_URL_PREFIX}/{stored_name}",
            size=len(incoming.content),
            type=incoming.content_type,
        )

    async def cleanup_file(self, stored_name: str) -> None:
        """Best-effort removal of a stored file; failures are only logged."""
        path = self.upload_dir / stored_name
        try:
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up file: %s", stored_name)
        except OSError as e:
            logger.warning("Failed to clean up file %s: %s", stored_name, str(e))

    async def validate_and_store(self, files: Sequence[IncomingFile]) -> List[UploadedFileDescriptor]:
        """
        Complete upload pipeline for one request.

        Validation order:
            1. File count (1..max_files)         → ValidationError (400)
            2. Each file's size                  → PayloadTooLargeError (413)
            3. Each file's type filter           → UnsupportedMediaTypeError (415)
            4. Store every file

        If a write fails part-way, files already written for this request are
        removed before the error propagates.
        """
        self.validate_count(len(files))
        for incoming in files:
            self.validate_size(incoming)
            self.validate_type(incoming)

        stored: List[UploadedFileDescriptor] = []
        try:
            for incoming in files:
                stored.append(await self.store_file(incoming))
        except FileStorageError:
            for descriptor in stored:
                await self.cleanup_file(descriptor.url.rsplit("/", 1)[-1])
            raise
        return stored

    # ── Retrieval ─────────────────────────────────────────────────────────

    def resolve_stored_file(self, filename: str) -> Path:
        """
        Map a name from an /uploads/ URL to a file in the upload directory.

        Raises:
            ValidationError: The name resolves outside the upload directory.
            NotFoundError: No such stored file.
        """
        full_path = (self.upload_dir / filename).resolve()
        if full_path.parent != self.upload_dir:
            raise ValidationError(message="Invalid file path", field="filename")
        if not full_path.is_file():
            raise NotFoundError(resource="file", resource_id=filename)
        return full_path

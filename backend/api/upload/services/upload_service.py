"""Upload service — handles file upload logic."""

import logging
import mimetypes
import os
import re
from datetime import datetime, timezone
from typing import BinaryIO, Protocol

from errors import FileTooLargeError, ValidationError
from api.files.dto.file import FileRecord
from api.files.repositories.files_repository import FilesRepository
from api.files.services.files_service import generate_id
from api.folders.dto.folder import FolderRecord
from api.folders.repositories.folders_repository import FoldersRepository
from api.upload.dto.upload import UploadedFile, UploadResponse
from stores.blob_storage import BlobStorage, StoredBlob

logger = logging.getLogger(__name__)


class IncomingFile(Protocol):
    """What the service needs from an upload (``fastapi.UploadFile`` fits)."""

    filename: str | None
    content_type: str | None
    file: BinaryIO


def parse_size(size_str: str) -> int:
    """Parse size string like '100MB', '1GB' into bytes."""
    if not size_str:
        return 0

    match = re.match(r"^(\d+(?:\.\d+)?)\s*(B|KB|MB|GB|TB)$", size_str.strip().upper())
    if not match:
        return 0

    value = float(match.group(1))
    unit = match.group(2)

    multipliers = {
        "B": 1,
        "KB": 1024,
        "MB": 1024**2,
        "GB": 1024**3,
        "TB": 1024**4,
    }

    return int(value * multipliers[unit])


def _measure(stream: BinaryIO) -> int:
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def _content_type(upload: IncomingFile) -> str:
    if upload.content_type:
        return upload.content_type
    guessed, _ = mimetypes.guess_type(upload.filename or "")
    return guessed or "application/octet-stream"


def save_upload(
    files_repo: FilesRepository,
    folders_repo: FoldersRepository,
    storage: BlobStorage,
    uploads: list[IncomingFile],
    uploader_name: str | None,
    base_url: str,
    secret_code: str | None = None,
    folder_name: str | None = None,
    max_file_size: str = "",
) -> UploadResponse:
    """Store every blob, then create the folder (if any) and the file records.

    Input is validated before any store is touched. A blob transport failure
    aborts the whole upload before a single record is written.
    """
    uploader_name = (uploader_name or "").strip()
    if not uploader_name:
        raise ValidationError("Please enter your name")
    if not uploads:
        raise ValidationError("No file provided")

    limit = parse_size(max_file_size)
    sizes = []
    for upload in uploads:
        if not (upload.filename or "").strip():
            raise ValidationError("Every file needs a name")
        size = _measure(upload.file)
        if limit and size > limit:
            raise FileTooLargeError(f"{upload.filename} exceeds max size of {max_file_size}")
        sizes.append(size)

    secret_code = (secret_code or "").strip() or None
    if secret_code and files_repo.find_by_secret_code(secret_code):
        raise ValidationError("This secret code is already in use")

    folder_name = (folder_name or "").strip()
    base_url = base_url.rstrip("/")

    # Blobs first: no record may point at a blob that never arrived
    stored: list[tuple[str, IncomingFile, StoredBlob]] = []
    for upload, size in zip(uploads, sizes):
        file_id = generate_id("file", files_repo.exists)
        path = f"files/{file_id}"
        blob = storage.upload(
            upload.file,
            path,
            size=size,
            on_progress=lambda percent, path=path: logger.debug("Uploading %s: %d%%", path, percent),
        )
        stored.append((file_id, upload, blob))

    folder = None
    if folder_name or len(uploads) > 1:
        folder = folders_repo.create(
            FolderRecord(
                id=generate_id("folder", folders_repo.exists),
                name=folder_name or f"{len(uploads)} files",
                uploader_name=uploader_name,
                created_at=datetime.now(timezone.utc),
            )
        )

    created = []
    for file_id, upload, blob in stored:
        record = files_repo.create(
            FileRecord(
                id=file_id,
                original_name=upload.filename.strip(),
                file_size=blob.size,
                mime_type=_content_type(upload),
                storage_path=blob.path,
                public_url=blob.public_url,
                download_count=0,
                created_at=datetime.now(timezone.utc),
                uploader_name=uploader_name,
                secret_code=secret_code,
                folder_id=folder.id if folder else None,
            )
        )
        logger.info("Stored %s (%s, %d bytes)", record.id, record.original_name, record.file_size)
        created.append(
            UploadedFile(**record.model_dump(), url=f"{base_url}/api/files/{record.id}")
        )

    if folder:
        url = f"{base_url}/api/folders/{folder.id}"
    else:
        url = created[0].url

    return UploadResponse(url=url, files=created, folder=folder)

"""Download service — handles file download logic."""

import logging

from api.files.dto.file import FileRecord
from api.files.repositories.files_repository import FilesRepository

logger = logging.getLogger(__name__)


def record_download(repo: FilesRepository, file_id: str) -> FileRecord:
    """Bump the download counter by one; unknown ids raise RecordNotFoundError."""
    updated = repo.increment_download(file_id)
    logger.info("Download of %s (count=%d)", file_id, updated.download_count)
    return updated

"""Search service — lookups by uploader name and secret code."""

from errors import ValidationError
from api.files.dto.file import FileRecord
from api.files.repositories.files_repository import FilesRepository


def by_uploader(repo: FilesRepository, name: str) -> list[FileRecord]:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Please enter an uploader name")
    return repo.find_by_uploader(name)


def by_secret_code(repo: FilesRepository, code: str) -> FileRecord | None:
    code = (code or "").strip()
    if not code:
        raise ValidationError("Please enter a secret code")
    return repo.find_by_secret_code(code)

"""Upload Data Transfer Objects."""

from pydantic import BaseModel

from api.files.dto.file import FileResponse
from api.folders.dto.folder import FolderRecord


class UploadedFile(FileResponse):
    url: str


class UploadResponse(BaseModel):
    url: str
    files: list[UploadedFile]
    folder: FolderRecord | None = None

"""Folder Data Transfer Objects."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from api.files.dto.file import FileResponse, as_utc


class FolderRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    uploader_name: str | None = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class FolderResponse(BaseModel):
    id: str
    name: str
    uploader_name: str | None = None
    created_at: datetime
    files: list[FileResponse] = []

"""File Data Transfer Objects."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime) -> datetime:
    """Naive timestamps coming back from the database are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class FileRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    original_name: str
    file_size: int = Field(ge=0)
    mime_type: str
    storage_path: str
    public_url: str
    download_count: int = Field(default=0, ge=0)
    created_at: datetime
    uploader_name: str | None = None
    secret_code: str | None = None
    folder_id: str | None = None

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class FileResponse(BaseModel):
    """Public view of a file; the secret code is never echoed back."""

    id: str
    original_name: str
    file_size: int
    mime_type: str
    public_url: str
    download_count: int
    created_at: datetime
    uploader_name: str | None = None
    folder_id: str | None = None

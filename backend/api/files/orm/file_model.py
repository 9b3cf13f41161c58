"""File ORM model."""

from sqlalchemy import Column, DateTime, Integer, String

from database import Base


class FileModel(Base):
    __tablename__ = "files"

    # Insertion order; list() sorts by it
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, index=True)
    original_name = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False, default=0)
    mime_type = Column(String, nullable=False)
    storage_path = Column(String, nullable=False)
    public_url = Column(String, nullable=False)
    download_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    uploader_name = Column(String, nullable=True, index=True)
    secret_code = Column(String, nullable=True, index=True)
    # No foreign key: a folder may live in the local store while its files are remote
    folder_id = Column(String, nullable=True, index=True)

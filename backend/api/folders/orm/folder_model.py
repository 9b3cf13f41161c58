"""Folder ORM model."""

from sqlalchemy import Column, DateTime, Integer, String

from database import Base


class FolderModel(Base):
    __tablename__ = "folders"

    # Insertion order; list() sorts by it
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    uploader_name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)

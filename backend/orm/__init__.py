"""Central ORM module — imports all models for Alembic metadata discovery."""

from api.files.orm.file_model import FileModel
from api.folders.orm.folder_model import FolderModel

__all__ = [
    "FileModel",
    "FolderModel",
]

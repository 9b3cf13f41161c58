"""Folders service."""

from api.files.repositories.files_repository import FilesRepository
from api.folders.dto.folder import FolderResponse
from api.folders.repositories.folders_repository import FoldersRepository


def get_folder(
    folders_repo: FoldersRepository, files_repo: FilesRepository, folder_id: str
) -> FolderResponse:
    """Folder with its files in upload order."""
    folder = folders_repo.get_by_id(folder_id)
    files = files_repo.list_by_folder(folder.id)
    return FolderResponse(
        id=folder.id,
        name=folder.name,
        uploader_name=folder.uploader_name,
        created_at=folder.created_at,
        files=[f.model_dump() for f in files],
    )

"""Folders controller — API routes for folder details."""

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_files_repository, get_folders_repository
from errors import RecordNotFoundError, StorageUnavailableError
from api.files.repositories.files_repository import FilesRepository
from api.folders.dto.folder import FolderResponse
from api.folders.repositories.folders_repository import FoldersRepository
from api.folders.services import folders_service

router = APIRouter(prefix="/api/folders", tags=["Folders"])


@router.get("/{folder_id}", response_model=FolderResponse)
def get_folder(
    folder_id: str,
    folders_repo: FoldersRepository = Depends(get_folders_repository),
    files_repo: FilesRepository = Depends(get_files_repository),
):
    try:
        return folders_service.get_folder(folders_repo, files_repo, folder_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Folder not found")
    except StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

"""Files controller — API routes for file details."""

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_files_repository
from errors import RecordNotFoundError, StorageUnavailableError
from api.files.dto.file import FileResponse
from api.files.repositories.files_repository import FilesRepository
from api.files.services import files_service

router = APIRouter(prefix="/api/files", tags=["Files"])


@router.get("/{file_id}", response_model=FileResponse)
def get_file(file_id: str, repo: FilesRepository = Depends(get_files_repository)):
    try:
        return files_service.get_file(repo, file_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="File not found")
    except StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

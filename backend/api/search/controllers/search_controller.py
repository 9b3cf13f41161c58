"""Search controller — find files by uploader name or secret code."""

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_files_repository
from errors import StorageUnavailableError, ValidationError
from api.files.dto.file import FileResponse
from api.files.repositories.files_repository import FilesRepository
from api.search.services import search_service

router = APIRouter(prefix="/api/search", tags=["Search"])


@router.get("/uploader", response_model=list[FileResponse])
def search_by_uploader(name: str = "", repo: FilesRepository = Depends(get_files_repository)):
    try:
        return search_service.by_uploader(repo, name)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/secret-code", response_model=FileResponse)
def search_by_secret_code(code: str = "", repo: FilesRepository = Depends(get_files_repository)):
    try:
        file = search_service.by_secret_code(repo, code)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if not file:
        raise HTTPException(status_code=404, detail="No file found with this secret code")
    return file

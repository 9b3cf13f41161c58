"""Download controller — counts a download and hands off to the blob URL."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from dependencies import get_files_repository
from errors import RecordNotFoundError, StorageUnavailableError
from api.download.services import download_service
from api.files.repositories.files_repository import FilesRepository

router = APIRouter(tags=["Download"])


@router.get("/api/files/{file_id}/download")
def download_file(file_id: str, repo: FilesRepository = Depends(get_files_repository)):
    try:
        file = download_service.record_download(repo, file_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="File not found")
    except StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return RedirectResponse(url=file.public_url, status_code=302)

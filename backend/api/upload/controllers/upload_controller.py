"""Upload controller — handles multipart file uploads."""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile

from dependencies import (
    get_blob_storage,
    get_files_repository,
    get_folders_repository,
    get_max_file_size,
)
from errors import FileTooLargeError, StorageUnavailableError, TransportError, ValidationError
from api.files.repositories.files_repository import FilesRepository
from api.folders.repositories.folders_repository import FoldersRepository
from api.upload.dto.upload import UploadResponse
from api.upload.services import upload_service
from stores.blob_storage import BlobStorage

router = APIRouter(tags=["Upload"])


@router.post("/api/upload", response_model=UploadResponse, status_code=201)
def upload_files(
    request: Request,
    files: list[UploadFile] = File(...),
    uploader_name: str = Form(""),
    secret_code: str = Form(""),
    folder_name: str = Form(""),
    files_repo: FilesRepository = Depends(get_files_repository),
    folders_repo: FoldersRepository = Depends(get_folders_repository),
    storage: BlobStorage = Depends(get_blob_storage),
    max_file_size: str = Depends(get_max_file_size),
):
    """Upload one or more files; several files share a new folder."""
    try:
        return upload_service.save_upload(
            files_repo,
            folders_repo,
            storage,
            files,
            uploader_name=uploader_name,
            base_url=str(request.base_url),
            secret_code=secret_code,
            folder_name=folder_name,
            max_file_size=max_file_size,
        )
    except FileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TransportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except StorageUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

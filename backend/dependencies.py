"""Request dependencies — store handles owned by the application instance."""

from fastapi import Request

from api.files.repositories.files_repository import FilesRepository
from api.folders.repositories.folders_repository import FoldersRepository
from stores.blob_storage import BlobStorage


def get_files_repository(request: Request) -> FilesRepository:
    return request.app.state.files_repository


def get_folders_repository(request: Request) -> FoldersRepository:
    return request.app.state.folders_repository


def get_blob_storage(request: Request) -> BlobStorage:
    return request.app.state.blob_storage


def get_max_file_size(request: Request) -> str:
    return request.app.state.max_file_size

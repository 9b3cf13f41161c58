"""Application factory — wires stores, repositories and routers."""

from pathlib import Path

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import sessionmaker

from config import FILES_DIR, LOCAL_STORE_DIR, MAX_FILE_SIZE, PUBLIC_BASE_URL
from database import SessionLocal
from dependencies import get_files_repository
from api.download.controllers.download_controller import router as download_router
from api.files.controllers.files_controller import router as files_router
from api.files.dto.file import FileRecord
from api.files.orm.file_model import FileModel
from api.files.repositories.files_repository import FilesRepository
from api.folders.controllers.folders_controller import router as folders_router
from api.folders.dto.folder import FolderRecord
from api.folders.orm.folder_model import FolderModel
from api.folders.repositories.folders_repository import FoldersRepository
from api.search.controllers.search_controller import router as search_router
from api.upload.controllers.upload_controller import router as upload_router
from stores.blob_storage import LocalBlobStorage
from stores.local_store import LocalRecordStore, LocalStorage
from stores.sql_store import SqlRecordStore

BLOBS_ROUTE = "/blobs"


def create_app(
    session_factory: sessionmaker = SessionLocal,
    local_store_dir: Path = LOCAL_STORE_DIR,
    files_dir: Path = FILES_DIR,
    public_base_url: str = PUBLIC_BASE_URL,
    max_file_size: str = MAX_FILE_SIZE,
) -> FastAPI:
    app = FastAPI(title="Atlas", version="0.1.0")

    local_storage = LocalStorage(local_store_dir)
    app.state.files_repository = FilesRepository(
        remote=SqlRecordStore(session_factory, FileModel, FileRecord),
        local=LocalRecordStore(local_storage, "files", FileRecord),
    )
    app.state.folders_repository = FoldersRepository(
        remote=SqlRecordStore(session_factory, FolderModel, FolderRecord),
        local=LocalRecordStore(local_storage, "folders", FolderRecord),
    )
    app.state.blob_storage = LocalBlobStorage(
        files_dir, f"{public_base_url.rstrip('/')}{BLOBS_ROUTE}"
    )
    app.state.max_file_size = max_file_size

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    Path(files_dir).mkdir(parents=True, exist_ok=True)
    app.mount(BLOBS_ROUTE, StaticFiles(directory=files_dir), name="blobs")

    @app.get("/api/health")
    def health(repo: FilesRepository = Depends(get_files_repository)):
        return {
            "status": "ok",
            "record_store": "remote" if repo.remote.available() else "local",
        }

    app.include_router(upload_router)
    app.include_router(download_router)
    app.include_router(files_router)
    app.include_router(folders_router)
    app.include_router(search_router)

    return app

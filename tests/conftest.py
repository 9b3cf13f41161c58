import itertools
import os
import tempfile
from datetime import datetime, timedelta, timezone

os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="atlas-test-"))

import pytest
from fastapi.testclient import TestClient

import orm  # noqa: F401
from application import create_app
from database import Base, make_engine, make_session_factory
from api.files.dto.file import FileRecord
from api.files.orm.file_model import FileModel
from api.files.repositories.files_repository import FilesRepository
from api.folders.dto.folder import FolderRecord
from api.folders.orm.folder_model import FolderModel
from api.folders.repositories.folders_repository import FoldersRepository
from stores.blob_storage import LocalBlobStorage
from stores.local_store import LocalRecordStore, LocalStorage
from stores.sql_store import SqlRecordStore

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_factory(tmp_path):
    """Record store with its tables provisioned."""
    engine = make_engine(f"sqlite:///{tmp_path}/records.db")
    Base.metadata.create_all(bind=engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def offline_session_factory(tmp_path):
    """Record store whose tables were never created: every query fails."""
    engine = make_engine(f"sqlite:///{tmp_path}/unprovisioned.db")
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(tmp_path / "local")


def _repositories(session_factory, local_storage):
    files = FilesRepository(
        remote=SqlRecordStore(session_factory, FileModel, FileRecord),
        local=LocalRecordStore(local_storage, "files", FileRecord),
    )
    folders = FoldersRepository(
        remote=SqlRecordStore(session_factory, FolderModel, FolderRecord),
        local=LocalRecordStore(local_storage, "folders", FolderRecord),
    )
    return files, folders


@pytest.fixture
def files_repository(session_factory, local_storage):
    return _repositories(session_factory, local_storage)[0]


@pytest.fixture
def folders_repository(session_factory, local_storage):
    return _repositories(session_factory, local_storage)[1]


@pytest.fixture
def offline_files_repository(offline_session_factory, local_storage):
    return _repositories(offline_session_factory, local_storage)[0]


@pytest.fixture
def offline_folders_repository(offline_session_factory, local_storage):
    return _repositories(offline_session_factory, local_storage)[1]


@pytest.fixture
def blob_storage(tmp_path):
    return LocalBlobStorage(tmp_path / "blobs", "http://testserver/blobs")


@pytest.fixture
def make_file():
    counter = itertools.count()

    def _make(**overrides) -> FileRecord:
        n = next(counter)
        data = {
            "id": f"file_{n}",
            "original_name": f"report-{n}.pdf",
            "file_size": 1024 + n,
            "mime_type": "application/pdf",
            "storage_path": f"files/file_{n}",
            "public_url": f"http://testserver/blobs/files/file_{n}",
            "download_count": 0,
            "created_at": BASE_TIME + timedelta(seconds=n),
            "uploader_name": "Alice",
        }
        data.update(overrides)
        return FileRecord(**data)

    return _make


@pytest.fixture
def make_folder():
    counter = itertools.count()

    def _make(**overrides) -> FolderRecord:
        n = next(counter)
        data = {
            "id": f"folder_{n}",
            "name": f"Folder {n}",
            "uploader_name": "Alice",
            "created_at": BASE_TIME + timedelta(seconds=n),
        }
        data.update(overrides)
        return FolderRecord(**data)

    return _make


@pytest.fixture
def make_client(tmp_path):
    def _make(session_factory, **kwargs) -> TestClient:
        app = create_app(
            session_factory=session_factory,
            local_store_dir=tmp_path / "local",
            files_dir=tmp_path / "blobs",
            public_base_url="http://testserver",
            **kwargs,
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, session_factory):
    return make_client(session_factory)


@pytest.fixture
def offline_client(make_client, offline_session_factory):
    return make_client(offline_session_factory)

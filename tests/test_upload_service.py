import io
from dataclasses import dataclass, field
from typing import BinaryIO

import pytest

from errors import FileTooLargeError, TransportError, ValidationError
from api.upload.services import upload_service
from stores.blob_storage import BlobStorage


@dataclass
class Incoming:
    filename: str
    content: bytes = b"hello"
    content_type: str | None = "text/plain"
    file: BinaryIO = field(init=False)

    def __post_init__(self):
        self.file = io.BytesIO(self.content)


class BrokenStorage(BlobStorage):
    def upload(self, source, path, size=None, on_progress=None):
        raise TransportError("connection reset")


def _upload(files_repo, folders_repo, storage, uploads, **kwargs):
    kwargs.setdefault("uploader_name", "Alice")
    return upload_service.save_upload(
        files_repo, folders_repo, storage, uploads, base_url="http://testserver/", **kwargs
    )


def test_single_file_upload(files_repository, folders_repository, blob_storage):
    result = _upload(
        files_repository, folders_repository, blob_storage,
        [Incoming("notes.txt", b"some notes")], uploader_name="  Alice ", secret_code=" k3y ",
    )

    assert result.folder is None
    [uploaded] = result.files
    assert uploaded.id.startswith("file_")
    assert result.url == f"http://testserver/api/files/{uploaded.id}"

    record = files_repository.get_by_id(uploaded.id)
    assert record.original_name == "notes.txt"
    assert record.file_size == 10
    assert record.mime_type == "text/plain"
    assert record.storage_path == f"files/{record.id}"
    assert record.download_count == 0
    assert record.uploader_name == "Alice"
    assert record.secret_code == "k3y"
    assert (blob_storage.root / record.storage_path).read_bytes() == b"some notes"


def test_blank_secret_code_is_stored_as_none(files_repository, folders_repository, blob_storage):
    result = _upload(files_repository, folders_repository, blob_storage, [Incoming("a.txt")], secret_code="   ")
    assert files_repository.get_by_id(result.files[0].id).secret_code is None


def test_mime_type_guessed_when_missing(files_repository, folders_repository, blob_storage):
    result = _upload(
        files_repository, folders_repository, blob_storage, [Incoming("photo.png", content_type=None)]
    )
    assert result.files[0].mime_type == "image/png"


def test_several_files_share_one_folder(files_repository, folders_repository, blob_storage):
    result = _upload(
        files_repository, folders_repository, blob_storage,
        [Incoming("one.txt"), Incoming("two.txt")],
    )

    assert result.folder is not None
    assert result.folder.name == "2 files"
    assert result.url == f"http://testserver/api/folders/{result.folder.id}"
    assert folders_repository.get_by_id(result.folder.id) == result.folder
    listed = files_repository.list_by_folder(result.folder.id)
    assert [f.original_name for f in listed] == ["one.txt", "two.txt"]


def test_named_folder_for_single_file(files_repository, folders_repository, blob_storage):
    result = _upload(
        files_repository, folders_repository, blob_storage, [Incoming("one.txt")], folder_name="Holiday"
    )
    assert result.folder.name == "Holiday"
    assert result.files[0].folder_id == result.folder.id


def test_missing_uploader_name_touches_no_store(offline_files_repository, offline_folders_repository,
                                                 blob_storage, local_storage):
    with pytest.raises(ValidationError):
        _upload(offline_files_repository, offline_folders_repository, blob_storage,
                [Incoming("a.txt")], uploader_name="   ")
    assert local_storage.get_item("files") is None
    assert not blob_storage.root.exists()


def test_no_files(files_repository, folders_repository, blob_storage):
    with pytest.raises(ValidationError):
        _upload(files_repository, folders_repository, blob_storage, [])


def test_file_too_large(files_repository, folders_repository, blob_storage):
    with pytest.raises(FileTooLargeError):
        _upload(files_repository, folders_repository, blob_storage,
                [Incoming("big.bin", b"x" * 2048)], max_file_size="1KB")


def test_secret_code_already_in_use(files_repository, folders_repository, blob_storage):
    _upload(files_repository, folders_repository, blob_storage, [Incoming("a.txt")], secret_code="shared")
    with pytest.raises(ValidationError):
        _upload(files_repository, folders_repository, blob_storage, [Incoming("b.txt")], secret_code="shared")


def test_transport_failure_creates_no_record(files_repository, folders_repository):
    with pytest.raises(TransportError):
        _upload(files_repository, folders_repository, BrokenStorage(),
                [Incoming("a.txt"), Incoming("b.txt")])
    assert files_repository.find_by_uploader("Alice") == []
    assert folders_repository.remote.list() == []


def test_upload_during_outage_is_still_retrievable(offline_files_repository, offline_folders_repository,
                                                   blob_storage):
    result = _upload(offline_files_repository, offline_folders_repository, blob_storage,
                     [Incoming("a.txt")], secret_code="offline")
    file_id = result.files[0].id
    assert offline_files_repository.get_by_id(file_id).original_name == "a.txt"
    assert offline_files_repository.find_by_secret_code("offline").id == file_id


@pytest.mark.parametrize(
    "text,expected",
    [("100MB", 100 * 1024**2), ("1.5 KB", 1536), ("12b", 12), ("", 0), ("lots", 0)],
)
def test_parse_size(text, expected):
    assert upload_service.parse_size(text) == expected

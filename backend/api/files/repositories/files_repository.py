"""Files repository — data access over the record store with local fallback.

Every operation tries the remote record store first and falls back to the
local store when the remote fails. Fallback is never reported to callers.
"""

from errors import RecordNotFoundError, RemoteUnavailableError
from api.files.dto.file import FileRecord
from stores.base import RecordStore
from stores.fallback import with_fallback


class FilesRepository:
    def __init__(self, remote: RecordStore[FileRecord], local: RecordStore[FileRecord]):
        self.remote = remote
        self.local = local

    def create(self, record: FileRecord) -> FileRecord:
        return with_fallback(
            "create file",
            lambda: self.remote.create(record),
            lambda: self.local.create(record),
        )

    def get_by_id(self, file_id: str) -> FileRecord:
        found = with_fallback(
            "get file",
            lambda: self.remote.list(where={"id": file_id}, limit=1),
            lambda: self.local.list(where={"id": file_id}, limit=1),
            fallback_on_empty=True,
        )
        if not found:
            raise RecordNotFoundError(file_id)
        return found[0]

    def exists(self, file_id: str) -> bool:
        try:
            self.get_by_id(file_id)
        except RecordNotFoundError:
            return False
        return True

    def find_by_uploader(self, name: str) -> list[FileRecord]:
        """Remote lookup is an exact match; the local scan ignores case.

        The two paths disagree on case sensitivity. Both behaviours are kept
        as they are until the intended one is settled.
        """
        def scan_local() -> list[FileRecord]:
            wanted = name.lower()
            return [
                r for r in self.local.list()
                if r.uploader_name is not None and r.uploader_name.lower() == wanted
            ]

        return with_fallback(
            "find files by uploader",
            lambda: self.remote.list(where={"uploader_name": name}),
            scan_local,
        )

    def find_by_secret_code(self, code: str) -> FileRecord | None:
        found = with_fallback(
            "find file by secret code",
            lambda: self.remote.list(where={"secret_code": code}, limit=1),
            lambda: self.local.list(where={"secret_code": code}, limit=1),
            fallback_on_empty=True,
        )
        return found[0] if found else None

    def list_by_folder(self, folder_id: str) -> list[FileRecord]:
        return with_fallback(
            "list folder files",
            lambda: self.remote.list(where={"folder_id": folder_id}),
            lambda: self.local.list(where={"folder_id": folder_id}),
            fallback_on_empty=True,
        )

    def increment_download(self, file_id: str) -> FileRecord:
        # A record written during an outage exists only locally, so a remote
        # miss also falls through to the local store.
        return with_fallback(
            "increment download count",
            lambda: self.remote.increment(file_id, "download_count"),
            lambda: self.local.increment(file_id, "download_count"),
            fallback_on=(RemoteUnavailableError, RecordNotFoundError),
        )

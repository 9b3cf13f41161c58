"""Folders repository — data access over the record store with local fallback."""

from errors import RecordNotFoundError
from api.folders.dto.folder import FolderRecord
from stores.base import RecordStore
from stores.fallback import with_fallback


class FoldersRepository:
    def __init__(self, remote: RecordStore[FolderRecord], local: RecordStore[FolderRecord]):
        self.remote = remote
        self.local = local

    def create(self, record: FolderRecord) -> FolderRecord:
        return with_fallback(
            "create folder",
            lambda: self.remote.create(record),
            lambda: self.local.create(record),
        )

    def get_by_id(self, folder_id: str) -> FolderRecord:
        found = with_fallback(
            "get folder",
            lambda: self.remote.list(where={"id": folder_id}, limit=1),
            lambda: self.local.list(where={"id": folder_id}, limit=1),
            fallback_on_empty=True,
        )
        if not found:
            raise RecordNotFoundError(folder_id)
        return found[0]

    def exists(self, folder_id: str) -> bool:
        try:
            self.get_by_id(folder_id)
        except RecordNotFoundError:
            return False
        return True

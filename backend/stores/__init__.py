"""Record and blob stores."""

from stores.base import RecordStore
from stores.blob_storage import BlobStorage, LocalBlobStorage, StoredBlob
from stores.fallback import with_fallback
from stores.local_store import LocalRecordStore, LocalStorage
from stores.sql_store import SqlRecordStore

__all__ = [
    "BlobStorage",
    "LocalBlobStorage",
    "LocalRecordStore",
    "LocalStorage",
    "RecordStore",
    "SqlRecordStore",
    "StoredBlob",
    "with_fallback",
]

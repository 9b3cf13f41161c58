"""Local fallback store — one serialized JSON list per collection key.

Every operation reads the whole list and, when it mutates, writes the whole
list back. A missing key reads as an empty list. The ``LocalStorage`` handle
is owned by whoever creates it, so tests get isolated instances.
"""

import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from errors import DuplicateRecordError, RecordNotFoundError, StorageUnavailableError
from stores.base import RecordStore, T


def _index_of(records, record_id: str) -> int:
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    raise RecordNotFoundError(record_id)


class LocalStorage:
    """Key/value storage of serialized strings, one file per key."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.lock = threading.RLock()

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=str(self.directory), suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, self._path(key))
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class LocalRecordStore(RecordStore[T]):
    def __init__(self, storage: LocalStorage, key: str, schema: type[T]):
        self.storage = storage
        self.key = key
        self.schema = schema
        self._adapter = TypeAdapter(list[schema])

    def _load(self) -> list[T]:
        try:
            raw = self.storage.get_item(self.key)
            return self._adapter.validate_json(raw) if raw else []
        except (OSError, ValueError) as e:
            raise StorageUnavailableError(f"local store '{self.key}' unreadable: {e}") from e

    def _save(self, records: list[T]) -> None:
        try:
            self.storage.set_item(self.key, self._adapter.dump_json(records).decode())
        except OSError as e:
            raise StorageUnavailableError(f"local store '{self.key}' unwritable: {e}") from e

    def create(self, record: T) -> T:
        with self.storage.lock:
            records = self._load()
            if any(r.id == record.id for r in records):
                raise DuplicateRecordError(f"{self.key}: {record.id} already exists")
            records.append(record)
            self._save(records)
        return record

    def list(self, where: dict[str, Any] | None = None, limit: int | None = None) -> list[T]:
        with self.storage.lock:
            records = self._load()
        if where:
            records = [
                r for r in records
                if all(getattr(r, field) == value for field, value in where.items())
            ]
        return records[:limit] if limit is not None else records

    def update(self, record_id: str, fields: dict[str, Any]) -> T:
        with self.storage.lock:
            records = self._load()
            index = _index_of(records, record_id)
            records[index] = records[index].model_copy(update=fields)
            self._save(records)
            return records[index]

    def increment(self, record_id: str, field: str, amount: int = 1) -> T:
        # Read-modify-write of the whole list; the lock keeps concurrent
        # increments in this process from losing a count.
        with self.storage.lock:
            records = self._load()
            index = _index_of(records, record_id)
            current = getattr(records[index], field) or 0
            records[index] = records[index].model_copy(update={field: current + amount})
            self._save(records)
            return records[index]

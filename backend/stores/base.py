"""Record store interface shared by the remote and local backends."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from errors import RemoteUnavailableError

T = TypeVar("T", bound=BaseModel)


class RecordStore(ABC, Generic[T]):
    """One collection of records keyed by ``id``.

    ``list`` filters by exact field equality and returns records in the
    order they were created in this store, whatever their timestamps.
    ``update`` and ``increment`` raise ``RecordNotFoundError`` for unknown ids.
    """

    @abstractmethod
    def create(self, record: T) -> T: ...

    @abstractmethod
    def list(self, where: dict[str, Any] | None = None, limit: int | None = None) -> list[T]: ...

    @abstractmethod
    def update(self, record_id: str, fields: dict[str, Any]) -> T: ...

    @abstractmethod
    def increment(self, record_id: str, field: str, amount: int = 1) -> T: ...

    def available(self) -> bool:
        """Capability probe: can this store answer a query right now?"""
        try:
            self.list(limit=1)
        except RemoteUnavailableError:
            return False
        return True

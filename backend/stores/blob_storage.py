"""Blob storage client — accepts a byte stream and a path, returns a public URL."""

import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Callable

from pydantic import BaseModel

from errors import TransportError

ProgressCallback = Callable[[int], None]


class StoredBlob(BaseModel):
    path: str
    public_url: str
    size: int


class BlobStorage(ABC):
    @abstractmethod
    def upload(
        self,
        source: BinaryIO,
        path: str,
        size: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> StoredBlob:
        """Store ``source`` under ``path``. Raises ``TransportError`` on failure."""


class LocalBlobStorage(BlobStorage):
    """Writes blobs below ``root`` and serves them from ``base_url``."""

    CHUNK_SIZE = 1024 * 1024  # 1MB

    def __init__(self, root: Path, base_url: str):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def _resolve(self, path: str) -> Path:
        parts = PurePosixPath(path).parts
        if not parts or any(p in ("..", "/") for p in parts):
            raise TransportError(f"Invalid storage path: {path!r}")
        return self.root.joinpath(*parts)

    def upload(
        self,
        source: BinaryIO,
        path: str,
        size: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> StoredBlob:
        final_path = self._resolve(path)
        tmp_name = None
        written = 0
        last_percent = -1
        try:
            final_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=str(final_path.parent))
            with os.fdopen(fd, "wb") as tmp:
                while chunk := source.read(self.CHUNK_SIZE):
                    tmp.write(chunk)
                    written += len(chunk)
                    if on_progress and size:
                        percent = min(100, written * 100 // size)
                        if percent != last_percent:
                            on_progress(percent)
                            last_percent = percent
            shutil.move(tmp_name, str(final_path))
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise TransportError(f"Upload of {path} failed: {e}") from e

        if on_progress and last_percent != 100:
            on_progress(100)

        return StoredBlob(path=path, public_url=f"{self.base_url}/{path}", size=written)

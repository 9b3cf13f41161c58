"""Files service — business logic for file lookup."""

import secrets
import time

from api.files.dto.file import FileRecord
from api.files.repositories.files_repository import FilesRepository

_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_id(prefix: str, exists) -> str:
    """Generate an id like ``file_1718000000000_k3j9x0a1b`` unknown to ``exists``."""
    while True:
        token = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
        record_id = f"{prefix}_{int(time.time() * 1000)}_{token}"
        if not exists(record_id):
            return record_id


def get_file(repo: FilesRepository, file_id: str) -> FileRecord:
    return repo.get_by_id(file_id)

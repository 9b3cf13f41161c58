"""Application configuration."""

import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("DATA_DIR", str(Path(__file__).parent.parent / "data")))
DATA_DIR.mkdir(parents=True, exist_ok=True)

# Blob storage
FILES_DIR = Path(os.environ.get("FILES_DIR", str(DATA_DIR / "files")))
FILES_DIR.mkdir(parents=True, exist_ok=True)

# Local fallback store (one JSON list per collection)
LOCAL_STORE_DIR = Path(os.environ.get("LOCAL_STORE_DIR", str(DATA_DIR / "local_store")))

# Record store
DATABASE_URL = os.environ.get("DATABASE_URL", f"sqlite:///{DATA_DIR}/atlas.db")

PUBLIC_BASE_URL = os.environ.get("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")
MAX_FILE_SIZE = os.environ.get("MAX_FILE_SIZE", "100MB").strip()

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
LOG_FILE = os.environ.get("LOG_FILE", "").strip()

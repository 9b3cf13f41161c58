"""Logging setup — console plus optional rotating file."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"

# Handlers added by init_logging, replaced on every call
_installed: list[logging.Handler] = []


def init_logging(level_name: str = LOG_LEVEL, log_file: str = LOG_FILE) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    _installed.append(stream_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=5)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)

    logging.getLogger(__name__).info("Logging initialized.")

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

# log file name -> minimum level written to it
LOG_FILES = {
    "test-execution.log": logging.INFO,
    "errors.log": logging.ERROR,
    "debug.log": logging.DEBUG,
}

_installed: List[logging.Handler] = []
_previous_level: Optional[int] = None


def configure_logging(logs_dir: str, level: str = "INFO") -> List[logging.Handler]:
    """
    Send log records to the console and to rotating files under logs_dir.
    Calling it again swaps out the handlers from the previous call.
    LOG_LEVEL applies to every output, files included.
    """
    global _previous_level
    reset_logging()
    os.makedirs(logs_dir, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    _installed.append(console)

    for filename, file_level in LOG_FILES.items():
        handler = RotatingFileHandler(
            os.path.join(logs_dir, filename),
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setLevel(file_level)
        handler.setFormatter(formatter)
        _installed.append(handler)

    root = logging.getLogger()
    _previous_level = root.level
    root.setLevel(level)
    for handler in _installed:
        root.addHandler(handler)
    return list(_installed)


def reset_logging():
    """Detach and close the handlers installed by configure_logging"""
    global _previous_level
    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()
    if _previous_level is not None:
        root.setLevel(_previous_level)
        _previous_level = None

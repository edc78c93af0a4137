"""Logging for stampnotes.

Edits, anchor creation and seeks are logged under the ``stampnotes``
logger. A rotating file keeps the full DEBUG trail; the terminal only sees
warnings so the editor screen is not overdrawn.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path.home() / ".config" / "stampnotes"
LOG_FILE = LOG_DIR / "stampnotes.log"

_LOG_MAX_BYTES = 5 * 1024 * 1024
_LOG_BACKUP_COUNT = 2

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_STDERR_FORMAT = "%(levelname)s: %(message)s"


def _file_handler(log_file: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        str(log_file),
        maxBytes=_LOG_MAX_BYTES,
        backupCount=_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Attach file and stderr handlers to the ``stampnotes`` logger.

    Calling it again replaces the previous handlers.
    """
    log_file = log_file or LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger("stampnotes")
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    package_logger.addHandler(_file_handler(log_file))

    stderr = logging.StreamHandler()
    stderr.setLevel(logging.DEBUG if debug else logging.WARNING)
    stderr.setFormatter(logging.Formatter(_STDERR_FORMAT))
    package_logger.addHandler(stderr)

"""Logging setup: console output plus optional request and error log files."""

import logging
import os
from pathlib import Path

from around.config import Settings

REQUEST_LOGGER = "around.requests"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _add_file_handler(
    logger: logging.Logger, path: Path, level: int = logging.NOTSET
) -> None:
    """Attach a file handler for ``path`` unless the logger already has one."""
    filename = os.path.abspath(path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == filename:
            return

    handler = logging.FileHandler(filename, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings.

    With ``log_dir`` set, request lines go to ``request.log`` and everything at
    ERROR and above goes to ``error.log``. Safe to call on every app start.
    """
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level.upper())

    if not settings.log_dir:
        return

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    _add_file_handler(logging.getLogger(REQUEST_LOGGER), log_dir / "request.log")
    _add_file_handler(logging.getLogger(), log_dir / "error.log", logging.ERROR)

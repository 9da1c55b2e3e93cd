"""Logging setup for the media archive.

One console handler and one file handler on the root logger, configured on the
first ``get_logger`` call. Page events go through ``log_event`` as single
tab-separated lines on the ``media_archive.events`` logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict

from core import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
EVENTS_LOGGER = "media_archive.events"
LOG_FILE_NAME = "media_archive.log"


class LoggerManager:
    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._configured:
            cls._configure_logging()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)
        return cls._loggers[name]

    @classmethod
    def _configure_logging(cls) -> None:
        if cls._configured:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.log_level(), logging.INFO))

        # Streamlit reruns the script; keep handlers from piling up
        if root_logger.handlers:
            cls._configured = True
            return

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        target_dir = config.log_dir()
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(target_dir / LOG_FILE_NAME, encoding="utf-8")
        except OSError as e:
            root_logger.warning(f"File logging disabled: {e}")
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        cls._configured = True


def get_logger(name: str) -> logging.Logger:
    return LoggerManager.get_logger(name)


def _short(value: Any, limit: int) -> str:
    return str(value).replace("\n", " ")[:limit]


def log_event(
    event_type: str,
    rows: int | None = None,
    action: str = "",
    source: str = "",
    error: str = "",
) -> str:
    """Write one event line and return it."""
    line = (
        f"{event_type}\t"
        f"rows={rows}\t"
        f"action={action!r}\t"
        f"source={_short(source, 300)!r}\t"
        f"error={_short(error, 300)!r}"
    )
    logger = get_logger(EVENTS_LOGGER)
    if error:
        logger.error(line)
    else:
        logger.info(line)
    return line

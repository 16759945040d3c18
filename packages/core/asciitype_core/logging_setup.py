"""Structured local logging setup.

Records go to a JSON-lines file under the config directory. Scheduler events
attach their fields through ``extra=``, and the formatter copies the known ones
into the payload. Console output, when enabled, goes to stderr because stdout
carries the rendered frames.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_root


_LOGGER_NAME = "asciitype"
_LOG_FILE = "asciitype.log"

EVENT_FIELDS = ("event", "source", "cells", "rows", "frames")


def log_dir(root: Path | None = None) -> Path:
    path = (root or config_root()) / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in EVENT_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _file_handler(directory: Path, keep_files: int) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(directory / _LOG_FILE),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    return handler


def configure_logging(
    keep_files: int = 7,
    console: bool = False,
    directory: Path | None = None,
) -> logging.Logger:
    """Attach file (and optionally stderr) handlers once; later calls are no-ops."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    target = directory or log_dir()
    target.mkdir(parents=True, exist_ok=True)
    logger.addHandler(_file_handler(target, keep_files))

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.info("logging configured", extra={"event": "logging_configured", "source": str(target)})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)

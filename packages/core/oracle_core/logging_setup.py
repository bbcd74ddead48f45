"""JSON file logging for the oracle and the uncaught-exception hook."""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import platform
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any


_LOGGER_NAME = "oracle"
_EXTRA_FIELDS = ("event", "crash_id", "chars", "dropped_chars", "keep_files", "exit_code", "time")
_MIN_KEEP_FILES = 2

_fault_file: IO[str] | None = None


def config_root() -> Path:
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Oracle"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Oracle"
    return Path.home() / ".config" / "oracle"


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    """One JSON object per line; known ``extra`` fields are copied through."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({name: getattr(record, name) for name in _EXTRA_FIELDS if hasattr(record, name)})
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def file_handler(logger: logging.Logger | None = None) -> logging.handlers.TimedRotatingFileHandler | None:
    for handler in (logger or get_logger()).handlers:
        if isinstance(handler, logging.handlers.TimedRotatingFileHandler):
            return handler
    return None


def configure_logging(keep_files: int = 7, console: bool = True) -> logging.Logger:
    """Attaches the daily-rotated JSON log once.

    Calling again keeps the existing handlers and only applies the new
    retention, so whichever caller knows the loaded config can set it.
    """
    logger = get_logger()
    keep = max(_MIN_KEEP_FILES, int(keep_files))

    existing = file_handler(logger)
    if existing is not None:
        if existing.backupCount != keep:
            existing.backupCount = keep
            logger.info("log retention updated", extra={"event": "log_retention", "keep_files": keep})
        return logger

    logger.setLevel(logging.INFO)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_dir() / "oracle.log"),
        when="midnight",
        backupCount=keep,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.info("logging configured", extra={"event": "logging_configured", "keep_files": keep})
    return logger


def close_fault_log() -> None:
    global _fault_file
    if _fault_file is None:
        return
    faulthandler.disable()
    _fault_file.close()
    _fault_file = None


def install_crash_hooks() -> None:
    """Logs uncaught exceptions and dumps hard crashes to ``fault.log``."""
    global _fault_file
    logger = get_logger()

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        crash_id = str(uuid.uuid4())
        logger.critical(
            f"uncaught exception crash_id={crash_id}",
            exc_info=(exc_type, exc_value, exc_tb),
            extra={"event": "uncaught_exception", "crash_id": crash_id},
        )

    sys.excepthook = _log_uncaught

    if _fault_file is None:
        _fault_file = (log_dir() / "fault.log").open("a", encoding="utf-8")
        faulthandler.enable(file=_fault_file)
        logger.info("fault handler enabled", extra={"event": "fault_handler_enabled"})

"""Logging for HabitTrack: console lines, a rotating JSON log, and a per-session transcript."""

from __future__ import annotations

import atexit
import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from .config import BaseConfig

ROOT_LOGGER_NAME = "habittrack"

_SESSION_LINES: List[str] = []
_SESSION_START = datetime.now()
_SESSION_LOG_PATH: Path | None = None
_FLUSH_REGISTERED = False


class SessionTranscriptHandler(logging.Handler):
    """Keeps every console-formatted line of this run so it can be written out at exit."""

    def __init__(self, formatter: logging.Formatter):
        super().__init__()
        self._formatter = formatter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            _SESSION_LINES.append(self._formatter.format(record))
        except Exception:  # pragma: no cover
            self.handleError(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per record; fields passed via ``extra`` land under ``"extra"``."""

    _STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "exc_info",
        "exc_text", "stack_info", "taskName", "asctime",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str)


def _flush_session() -> None:  # pragma: no cover - runs at interpreter exit
    if not _SESSION_LINES or _SESSION_LOG_PATH is None:
        return
    try:
        _SESSION_LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SESSION_LOG_PATH.open("w", encoding="utf-8") as f:
            f.write("# HabitTrack session log\n")
            f.write(f"# Started: {_SESSION_START.isoformat()}\n")
            f.write(f"# Entries: {len(_SESSION_LINES)}\n\n")
            for line in _SESSION_LINES:
                f.write(line + "\n")
    except OSError as e:
        sys.stderr.write(f"Failed to flush session log: {e}\n")


def _console_formatter(dev_mode: bool) -> logging.Formatter:
    if dev_mode:
        return logging.Formatter(
            fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
            datefmt="%H:%M:%S",
        )
    return logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(config: BaseConfig) -> logging.Logger:
    """Attach handlers to the ``habittrack`` logger and return it.

    Calling it again replaces the previous handlers. Store mutations log at
    INFO and lookup misses at DEBUG, so the JSON file records every change
    made during a session.
    """
    global _SESSION_LOG_PATH, _FLUSH_REGISTERED  # noqa: PLW0603

    logs_dir = Path(config.DATA_DIR) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if config.DEV_MODE else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_formatter = _console_formatter(config.DEV_MODE)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if config.DEV_MODE else logging.WARNING)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    log_file = logs_dir / config.LOG_FILENAME
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(JSONFormatter())
    logger.addHandler(file_handler)

    session_handler = SessionTranscriptHandler(console_formatter)
    session_handler.setLevel(logging.DEBUG)
    logger.addHandler(session_handler)

    _SESSION_LOG_PATH = logs_dir / _SESSION_START.strftime("session_%Y%m%d_%H%M%S.log")
    if not _FLUSH_REGISTERED:
        atexit.register(_flush_session)
        _FLUSH_REGISTERED = True

    logger.info(
        "Logging initialized",
        extra={
            "dev_mode": config.DEV_MODE,
            "log_file": str(log_file),
            "data_dir": config.DATA_DIR,
        },
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``habittrack`` logger; module names already under it pass through."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def session_log_path() -> Path | None:
    """Where the session transcript will be written, once logging is set up."""
    return _SESSION_LOG_PATH

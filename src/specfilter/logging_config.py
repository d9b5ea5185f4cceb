"""
Logging configuration for Specfilter.

A demo run writes three kinds of records:
- warnings and errors, shown on stderr (colored unless SPECFILTER_NO_COLOR is set)
- filter/scenario debug detail, kept in ``specfilter.log``
- one audit line per scenario, kept in ``specfilter-audit.log``
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

LOG_DIR = Path(os.getenv("SPECFILTER_LOG_DIR", "logs"))
AUDIT_LOGGER = "specfilter.audit"

# Runs are a handful of lines each; a few small files hold plenty of history.
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 3

LINE_FORMAT = "%(asctime)s | %(levelname)-8s | %(session_id)s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_session_context = threading.local()


class ContextFilter(logging.Filter):
    """Stamp each record with the current run's session ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = getattr(_session_context, "session_id", "N/A")
        return True


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.COLORS.get(record.levelname)
        return f"{color}{text}{self.RESET}" if color else text


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "session_id": getattr(record, "session_id", None),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _file_handler(filename: str, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        LOG_DIR / filename,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(ContextFilter())
    return handler


def _level(name: str, fallback: int) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else fallback


def setup_logging(
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    *,
    json_format: bool = False,
) -> None:
    """
    Route specfilter logging to stderr and the log directory.

    Args:
        console_level: Level name for stderr output
        file_level: Level name for ``specfilter.log``
        json_format: Write ``specfilter.log`` as one JSON object per line
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_level(console_level, logging.WARNING))
    formatter_cls = logging.Formatter if os.getenv("SPECFILTER_NO_COLOR") else ColoredFormatter
    console_handler.setFormatter(formatter_cls(LINE_FORMAT, datefmt=DATE_FORMAT))
    console_handler.addFilter(ContextFilter())
    root_logger.addHandler(console_handler)

    file_formatter = (
        JSONFormatter() if json_format else logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT)
    )
    root_logger.addHandler(
        _file_handler("specfilter.log", _level(file_level, logging.DEBUG), file_formatter)
    )

    audit_logger = logging.getLogger(AUDIT_LOGGER)
    audit_logger.handlers.clear()
    audit_logger.addHandler(
        _file_handler(
            "specfilter-audit.log",
            logging.INFO,
            logging.Formatter("%(asctime)s | %(session_id)s | %(message)s", datefmt=DATE_FORMAT),
        )
    )
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False

    logging.getLogger("specfilter.filtering").setLevel(logging.DEBUG)


def set_session_id(session_id: str) -> None:
    _session_context.session_id = session_id


def generate_session_id() -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"sess_{timestamp}_{uuid.uuid4().hex[:8]}"


def audit_log(message: str, **context: Any) -> None:
    """
    Write one line to the audit log.

    Example:
        audit_log("Scenario completed", scenario="green", matches=2)
    """
    context_str = " | ".join(f"{k}={v}" for k, v in context.items())
    full_message = f"{message} | {context_str}" if context else message
    logging.getLogger(AUDIT_LOGGER).info(full_message)

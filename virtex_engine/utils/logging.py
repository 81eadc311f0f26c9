"""
Logging configuration for virtex-engine.

Console logging by default, optional rotating file, and a JSON
formatter for shipping normalization logs to an aggregator.
"""
import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Attributes every LogRecord carries; anything else came in via `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class UtcFormatter(logging.Formatter):
    """
    Timestamps in UTC with millisecond precision and a trailing "Z".

    Normalized trade timestamps are UTC, so log lines line up with them
    regardless of the host timezone.
    """

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return f"{ct.strftime(datefmt or DEFAULT_DATE_FORMAT)}.{int(record.msecs):03d}Z"


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line.

    Fields passed through `extra=` are merged into the entry. Values json
    cannot encode natively (Decimal, datetime, Side) are stringified.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key not in log_entry:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    file_path: Optional[str] = None,
    max_file_size_mb: int = 100,
    backup_count: int = 5,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure root logging for the adapter.

    Console output goes to stderr so normalized JSON on stdout stays
    parseable. An unknown level falls back to INFO; AdapterConfig.validate
    reports it.

    Args:
        level: One of LOG_LEVELS, any case
        log_format: Format string (default DEFAULT_LOG_FORMAT)
        date_format: strftime format for asctime (default DEFAULT_DATE_FORMAT)
        file_path: Rotating log file, None for console only
        max_file_size_mb: Rotate after this many megabytes
        backup_count: Rotated files to keep
        json_format: One JSON object per line instead of text

    Returns:
        Root logger instance
    """
    level_name = str(level).upper()
    if level_name not in LOG_LEVELS:
        level_name = "INFO"

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    root_logger.handlers.clear()

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = UtcFormatter(
            fmt=log_format or DEFAULT_LOG_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if file_path:
        log_path = Path(file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger."""
    return logging.getLogger(name)

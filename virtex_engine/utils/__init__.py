"""
Utility functions and helpers.
"""
from .logging import (
    setup_logging,
    get_logger,
    UtcFormatter,
    JsonFormatter,
)
from .time import (
    EPOCH,
    ms_to_datetime,
    seconds_to_datetime,
    datetime_to_ms,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "UtcFormatter",
    "JsonFormatter",
    # Time
    "EPOCH",
    "ms_to_datetime",
    "seconds_to_datetime",
    "datetime_to_ms",
]

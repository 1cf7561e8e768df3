"""
Structured logging configuration for statecore.

Provides JSON-formatted logs with trace_id support so diagnostics from
different composers can be told apart.

Usage:
    from statecore.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="root-reducer")
    logger.warning("Unexpected key found")
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logger with structured logging.

    Reads STATECORE_LOG_LEVEL and STATECORE_LOG_FORMAT through Settings
    unless settings are passed explicitly.
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically a composer name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all records have a trace_id field, even if not logged via get_logger().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True

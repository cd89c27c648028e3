"""Structured logging configuration for basecrud."""

import logging
import sys
from typing import Optional

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    job_name: Optional[str] = None,
) -> None:
    """Configure logging for basecrud.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        job_name: Optional job name added to every record that lacks one
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("basecrud")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if job_name:
        handler.addFilter(_JobNameFilter(job_name))
    logger.addHandler(handler)


class _JobNameFilter(logging.Filter):
    def __init__(self, job_name: str):
        super().__init__()
        self._job_name = job_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "job_name"):
            record.job_name = self._job_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "job_name"):
            parts.append(f"job={record.job_name}")

        if hasattr(record, "item_index"):
            parts.append(f"item={record.item_index}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)

"""Logging configuration utilities for the icon pipeline.

Provides centralized logging configuration with:
- Flexible output (stdout or file)
- Customizable format strings
- Structured logging support (JSON lines)
- A timing decorator for whole-run durations
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
import functools
import json
import logging
import sys
import time
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Attributes every LogRecord has; anything else came in via ``extra=``.
_STANDARD_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    }
)


class StructuredJSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record.

    Format:
    {
        "level": "WARNING",
        "message": "...",
        "timestamp": "2026-01-29T12:00:00+00:00",
        "context": {"logger_name": "...", "module": "...", "line": 42, ...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            context["error_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            context["error_message"] = str(record.exc_info[1]) if record.exc_info[1] else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                context[key] = value

        log_entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(log_entry, default=str)


def _supress_noisy_loggers() -> None:
    """Supress noisy loggers."""
    logging.getLogger("PIL").setLevel(logging.WARNING)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Configure application-wide logging.

    Safe to call repeatedly; each call replaces the previous configuration.

    Args:
        level: Logging level name (case-insensitive)
        format_string: Format for text logs. Ignored if structured=True.
        filename: Log file path. If None, logs to stdout.
        structured: Emit JSON lines instead of text

    Examples:
        >>> configure_logging(level="DEBUG")
        >>> configure_logging(level="INFO", structured=True, filename="build.jsonl")
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)

    formatter: logging.Formatter
    if structured:
        formatter = StructuredJSONFormatter()
    else:
        if format_string is None:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        formatter = logging.Formatter(format_string)

    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,  # Allow reconfiguration
    )

    _supress_noisy_loggers()


def get_logger(name: str, **kwargs: Any) -> logging.Logger | logging.LoggerAdapter:
    """Get a logger, wrapped in a LoggerAdapter when context is given.

    Args:
        name: Logger name (usually __name__ from the calling module)
        **kwargs: Context attached to every record (e.g. source_dir)
    """
    named = logging.getLogger(name)
    if kwargs:
        return logging.LoggerAdapter(named, kwargs)
    return named


def log_duration(func: F) -> F:
    """Log how long ``func`` took at DEBUG level on its module's logger."""

    @functools.wraps(func)
    def wrapper_timer(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start_time
            logging.getLogger(func.__module__).debug(
                f"Function {func.__name__!r} took {elapsed:.4f} seconds to execute."
            )

    return wrapper_timer  # type: ignore[return-value]

"""Shared utilities for the icon pipeline."""

from icon_pipeline.core.utils.deadline import Deadline
from icon_pipeline.core.utils.logging import configure_logging, get_logger, log_duration

__all__ = [
    "Deadline",
    "configure_logging",
    "get_logger",
    "log_duration",
]

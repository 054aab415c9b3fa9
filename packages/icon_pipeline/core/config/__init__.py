"""Configuration management for the icon pipeline."""

from icon_pipeline.core.config.loader import (
    detect_format,
    find_project_config,
    load_config,
    load_project_config,
)
from icon_pipeline.core.config.models import (
    DEFAULT_DEST_DIR,
    DEFAULT_INLINE_THRESHOLD_BYTES,
    DEFAULT_SOURCE_DIR,
    LoggingConfig,
    PipelineConfig,
    ProjectConfig,
)

__all__ = [
    # Loaders
    "detect_format",
    "find_project_config",
    "load_config",
    "load_project_config",
    # Models
    "LoggingConfig",
    "PipelineConfig",
    "ProjectConfig",
    # Defaults
    "DEFAULT_DEST_DIR",
    "DEFAULT_INLINE_THRESHOLD_BYTES",
    "DEFAULT_SOURCE_DIR",
]

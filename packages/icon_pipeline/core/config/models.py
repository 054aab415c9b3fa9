"""Configuration models for the icon pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from icon_pipeline.core.errors import SourceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_DIR = Path("icons/")
DEFAULT_DEST_DIR = Path("stylesheets/icons/")
DEFAULT_INLINE_THRESHOLD_BYTES = 8 * 1024


def _check_bare_filename(value: str, suffix: str) -> str:
    if not value or Path(value).name != value or value in {".", ".."}:
        raise ValueError(f"must be a bare filename, got '{value}'")
    if not value.lower().endswith(suffix):
        raise ValueError(f"must end with '{suffix}', got '{value}'")
    return value


class PipelineConfig(BaseModel):
    """Invocation parameters for one pipeline run.

    Constructed once per invocation and validated once at start via
    :meth:`validate_paths`. Frozen so a run can't mutate its own inputs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_dir: Path = Field(
        default=DEFAULT_SOURCE_DIR, description="Directory of SVG/PNG icon files"
    )

    dest_dir: Path = Field(
        default=DEFAULT_DEST_DIR,
        description="Directory receiving the stylesheet (created if absent)",
    )

    stylesheet_name: str = Field(
        default="icons.css", description="Filename of the generated stylesheet"
    )

    class_prefix: str = Field(
        default="icon-",
        pattern=r"^([A-Za-z_-][A-Za-z0-9_-]*)?$",
        description="Prefix prepended to each logical name to form the CSS class",
    )

    inline_threshold_bytes: int = Field(
        default=DEFAULT_INLINE_THRESHOLD_BYTES,
        ge=0,
        description="Assets strictly smaller than this are inlined as data URIs",
    )

    preview: bool = Field(
        default=False, description="Also write an HTML preview page listing every icon"
    )

    preview_name: str = Field(default="preview.html", description="Filename of the preview page")

    timeout_seconds: float | None = Field(
        default=None, gt=0, description="Abort the run once this many seconds have elapsed"
    )

    @field_validator("source_dir", "dest_dir")
    @classmethod
    def validate_path(cls, value: Path) -> Path:
        raw = str(value)
        if not raw.strip():
            raise ValueError("path must not be empty")
        if "\x00" in raw:
            raise ValueError("path must not contain NUL bytes")
        return value

    @field_validator("stylesheet_name")
    @classmethod
    def validate_stylesheet_name(cls, value: str) -> str:
        return _check_bare_filename(value, ".css")

    @field_validator("preview_name")
    @classmethod
    def validate_preview_name(cls, value: str) -> str:
        return _check_bare_filename(value, ".html")

    @property
    def stylesheet_path(self) -> Path:
        """Absolute-or-relative path of the generated stylesheet."""
        return self.dest_dir / self.stylesheet_name

    @property
    def preview_path(self) -> Path:
        """Path of the optional preview page."""
        return self.dest_dir / self.preview_name

    def validate_paths(self) -> None:
        """Check that the source directory exists and is readable.

        Raises:
            SourceNotFoundError: If source_dir is missing, not a directory,
                or cannot be listed.
        """
        source = self.source_dir
        if not source.exists():
            raise SourceNotFoundError("Source directory does not exist", path=source)
        if not source.is_dir():
            raise SourceNotFoundError("Source path is not a directory", path=source)
        if not os.access(source, os.R_OK | os.X_OK):
            raise SourceNotFoundError("Source directory is not readable", path=source)
        logger.debug(f"Validated source directory: {source}")

    def resolve_relative_to(self, base: Path) -> PipelineConfig:
        """Return a copy whose relative directories are anchored at ``base``."""
        updates: dict[str, Path] = {}
        if not self.source_dir.is_absolute():
            updates["source_dir"] = base / self.source_dir
        if not self.dest_dir.is_absolute():
            updates["dest_dir"] = base / self.dest_dir
        return self.model_copy(update=updates) if updates else self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit one JSON object per log line")
    filename: str | None = Field(default=None, description="Log file (stdout if unset)")


class ProjectConfig(BaseModel):
    """Shape of an ``icon-pipeline.yaml`` / ``.json`` project file."""

    model_config = ConfigDict(extra="ignore")

    pipeline: PipelineConfig = PipelineConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_paths(cls) -> tuple[Path, ...]:
        """Candidate project files looked up in the working directory."""
        return (
            Path("icon-pipeline.yaml"),
            Path("icon-pipeline.yml"),
            Path("icon-pipeline.json"),
        )

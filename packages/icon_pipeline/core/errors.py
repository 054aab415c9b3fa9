"""Fatal error taxonomy for the icon pipeline.

Every fatal failure aborts the run and carries the offending path plus a
distinct process exit code. Per-file problems are not errors; they are
collected as warnings on the run summary instead.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PipelineErrorData(BaseModel):
    """Structured data for pipeline errors.

    Args:
        message: Human-readable error description
        path: Filesystem path the error refers to (if any)
        cause: Original exception that caused this error
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    message: str
    path: Path | None = None
    cause: BaseException | None = Field(default=None, repr=False)


class PipelineError(Exception):
    """Base exception for fatal pipeline failures.

    Attributes:
        data: Structured error data (PipelineErrorData)
        message: Human-readable error description
        path: Offending filesystem path (if any)
        cause: Original exception that caused this error
        exit_code: Process exit code the CLI reports for this error
    """

    exit_code: int = 3
    kind: str = "Internal"

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.data = PipelineErrorData(
            message=message,
            path=Path(path) if path is not None else None,
            cause=cause,
        )
        self.message = self.data.message
        self.path = self.data.path
        self.cause = self.data.cause

        super().__init__(str(self))

    def __str__(self) -> str:
        """Format error for logging and display."""
        if self.path is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind}: {self.message} | path={self.path}"


class SourceNotFoundError(PipelineError):
    """Source directory is missing, not a directory, or unreadable."""

    exit_code = 1
    kind = "SourceNotFound"


class DestUnwritableError(PipelineError):
    """Destination directory cannot be created or written to."""

    exit_code = 2
    kind = "DestUnwritable"


class InternalError(PipelineError):
    """Unexpected I/O or rendering failure."""

    exit_code = 3
    kind = "Internal"


class PipelineTimeoutError(PipelineError):
    """Run exceeded its configured deadline."""

    exit_code = 4
    kind = "Timeout"


class ConfigError(PipelineError):
    """Project config file is malformed or fails validation."""

    exit_code = 5
    kind = "Config"

"""Icon pipeline models.

Defines the data carried through a run:
- IconFormat: Recognized source formats
- IconAsset: One icon file read from the source directory
- WarningKind / PipelineWarning: Non-fatal per-file issues
- RunSummary: Outcome of a completed run
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IconFormat(str, Enum):
    """Recognized icon source formats.

    Attributes:
        SVG: Scalable vector graphic, emitted as ``image/svg+xml``.
        PNG: Raster image, emitted as ``image/png``.
    """

    SVG = "svg"
    PNG = "png"

    @property
    def mime_type(self) -> str:
        """MIME type used in data URIs."""
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        """Canonical lowercase extension including the dot."""
        return f".{self.value}"

    @classmethod
    def from_filename(cls, filename: str) -> IconFormat | None:
        """Classify a filename by extension (case-insensitive).

        Returns:
            The matching format, or None when the extension is unrecognized.
        """
        suffix = Path(filename).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            return None


_MIME_TYPES: dict[IconFormat, str] = {
    IconFormat.SVG: "image/svg+xml",
    IconFormat.PNG: "image/png",
}


@dataclass(frozen=True)
class IconAsset:
    """A single icon file, immutable once read."""

    filename: str
    path: Path
    content: bytes
    format: IconFormat
    name: str
    width: float | None = None
    height: float | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def mime_type(self) -> str:
        return self.format.mime_type

    @property
    def output_filename(self) -> str:
        """Filename used when the asset is copied next to the stylesheet."""
        return f"{self.name}{self.format.extension}"


class WarningKind(str, Enum):
    """Classification of non-fatal per-file issues.

    Attributes:
        UNSUPPORTED_FORMAT: Extension is not svg/png; file skipped.
        DUPLICATE_NAME: Logical name already taken by an earlier file; skipped.
        INVALID_NAME: Stem normalizes to an empty name; skipped.
        UNREADABLE: File could not be read; skipped.
        MALFORMED_IMAGE: Size could not be determined; file still emitted.
    """

    UNSUPPORTED_FORMAT = "unsupported_format"
    DUPLICATE_NAME = "duplicate_name"
    INVALID_NAME = "invalid_name"
    UNREADABLE = "unreadable"
    MALFORMED_IMAGE = "malformed_image"

    @property
    def skips_file(self) -> bool:
        """Whether a warning of this kind drops the file from the output."""
        return self is not WarningKind.MALFORMED_IMAGE


class PipelineWarning(BaseModel):
    """A non-fatal issue recorded against one source file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: WarningKind
    filename: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.filename}: {self.message}"


class RunSummary(BaseModel):
    """Result of a completed pipeline run.

    Attributes:
        processed: Number of icons emitted into the stylesheet
        skipped: Number of source files left out of the stylesheet
        warnings: Non-fatal issues in encounter order
        stylesheet_path: Where the stylesheet was written
        stylesheet_sha256: Digest of the written stylesheet bytes
        inlined: Logical names embedded as data URIs
        referenced: Logical names referenced as copied files
        copied_files: Paths of assets copied next to the stylesheet
        preview_path: Where the preview page was written (if enabled)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    processed: int = Field(ge=0)
    skipped: int = Field(ge=0)
    warnings: list[PipelineWarning] = Field(default_factory=list)
    stylesheet_path: Path
    stylesheet_sha256: str
    inlined: list[str] = Field(default_factory=list)
    referenced: list[str] = Field(default_factory=list)
    copied_files: list[Path] = Field(default_factory=list)
    preview_path: Path | None = None

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def warnings_of(self, kind: WarningKind) -> list[PipelineWarning]:
        """Warnings of a single kind, in encounter order."""
        return [w for w in self.warnings if w.kind is kind]

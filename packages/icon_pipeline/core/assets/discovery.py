"""Source directory enumeration.

Walks the top level of the source directory in lexical filename order and
turns every usable file into an :class:`IconAsset`. Problems with individual
files become warnings; only a source directory that can't be listed at all
is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from icon_pipeline.core.assets.dimensions import probe_size
from icon_pipeline.core.assets.models import (
    IconAsset,
    IconFormat,
    PipelineWarning,
    WarningKind,
)
from icon_pipeline.core.assets.naming import logical_name
from icon_pipeline.core.errors import SourceNotFoundError
from icon_pipeline.core.io import FileSystem
from icon_pipeline.core.utils.deadline import Deadline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryResult:
    """Assets read from the source directory plus per-file warnings."""

    assets: list[IconAsset] = field(default_factory=list)
    warnings: list[PipelineWarning] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return sum(1 for w in self.warnings if w.kind.skips_file)


def _warn(
    warnings: list[PipelineWarning], kind: WarningKind, filename: str, message: str
) -> None:
    warning = PipelineWarning(kind=kind, filename=filename, message=message)
    logger.warning(str(warning))
    warnings.append(warning)


def discover_icons(
    source_dir: Path,
    fs: FileSystem,
    deadline: Deadline | None = None,
) -> DiscoveryResult:
    """Enumerate and read icon files directly under ``source_dir``.

    Hidden files and subdirectories are ignored without a warning. When two
    files normalize to the same logical name the first in lexical filename
    order wins.

    Args:
        source_dir: Directory to scan (not recursive)
        fs: Filesystem to read through
        deadline: Optional run deadline, checked before each file

    Returns:
        DiscoveryResult with assets in filename order

    Raises:
        SourceNotFoundError: If the directory can't be listed
        PipelineTimeoutError: If the deadline passes mid-scan
    """
    try:
        filenames = sorted(fs.listdir(source_dir))
    except OSError as e:
        raise SourceNotFoundError(
            "Source directory could not be listed", path=source_dir, cause=e
        ) from e

    assets: list[IconAsset] = []
    warnings: list[PipelineWarning] = []
    owners: dict[str, str] = {}

    for filename in filenames:
        if deadline is not None:
            deadline.check(f"reading {filename}")

        if filename.startswith("."):
            logger.debug(f"Ignoring hidden file: {filename}")
            continue

        path = source_dir / filename
        if not fs.is_file(path):
            logger.debug(f"Ignoring non-file entry: {filename}")
            continue

        fmt = IconFormat.from_filename(filename)
        if fmt is None:
            _warn(
                warnings,
                WarningKind.UNSUPPORTED_FORMAT,
                filename,
                "extension is not one of .svg, .png; skipped",
            )
            continue

        name = logical_name(filename)
        if not name:
            _warn(
                warnings,
                WarningKind.INVALID_NAME,
                filename,
                "filename stem has no letters or digits; skipped",
            )
            continue

        if name in owners:
            _warn(
                warnings,
                WarningKind.DUPLICATE_NAME,
                filename,
                f"logical name '{name}' already taken by '{owners[name]}'; skipped",
            )
            continue

        try:
            content = fs.read_bytes(path)
        except OSError as e:
            _warn(warnings, WarningKind.UNREADABLE, filename, f"could not be read ({e}); skipped")
            continue

        owners[name] = filename

        width: float | None = None
        height: float | None = None
        try:
            width, height = probe_size(content, fmt)
        except ValueError as e:
            _warn(
                warnings,
                WarningKind.MALFORMED_IMAGE,
                filename,
                f"size could not be determined ({e}); emitted without dimensions",
            )

        asset = IconAsset(
            filename=filename,
            path=path,
            content=content,
            format=fmt,
            name=name,
            width=width,
            height=height,
        )
        logger.debug(f"Read {filename} as '{name}' ({fmt.value}, {asset.size_bytes} bytes)")
        assets.append(asset)

    logger.info(f"Discovered {len(assets)} icon(s) in {source_dir}")
    return DiscoveryResult(assets=assets, warnings=warnings)

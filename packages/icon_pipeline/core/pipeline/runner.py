"""Icon Pipeline Runner.

One call of :func:`run` processes one (source_dir, dest_dir) pair to
completion:

1. Validate the config (source must exist and be readable)
2. Read every usable icon from the source directory
3. Compose rule blocks, inlining small assets as data URIs
4. Render the stylesheet (and optional preview) in memory
5. Create dest_dir, copy large assets, write the stylesheet atomically

Nothing touches dest_dir until steps 1-4 have succeeded, so a missing source
leaves the destination untouched. Output is deterministic: re-running on
unchanged input produces a byte-identical stylesheet.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
import time

from icon_pipeline.core.assets.discovery import discover_icons
from icon_pipeline.core.assets.models import RunSummary
from icon_pipeline.core.config.models import PipelineConfig
from icon_pipeline.core.errors import DestUnwritableError, InternalError
from icon_pipeline.core.io import FileSystem, RealFileSystem, WriteResult
from icon_pipeline.core.stylesheet.builder import StylesheetBuilder
from icon_pipeline.core.stylesheet.renderer import RenderError
from icon_pipeline.core.utils.deadline import Deadline
from icon_pipeline.core.utils.logging import get_logger, log_duration


def _prepare_dest(dest_dir: Path, fs: FileSystem) -> None:
    """Create dest_dir (and parents) or fail with DestUnwritableError."""
    if fs.exists(dest_dir) and not fs.is_dir(dest_dir):
        raise DestUnwritableError("Destination exists and is not a directory", path=dest_dir)
    try:
        fs.mkdirs(dest_dir, exist_ok=True)
    except OSError as e:
        raise DestUnwritableError(
            f"Destination could not be created: {e}", path=dest_dir, cause=e
        ) from e


def _write(fs: FileSystem, path: Path, content: bytes | str) -> WriteResult:
    try:
        if isinstance(content, str):
            return fs.write_text(path, content)
        return fs.write_bytes(path, content)
    except OSError as e:
        raise DestUnwritableError(f"Could not write output: {e}", path=path, cause=e) from e


def _same_directory(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return False


@log_duration
def run(
    config: PipelineConfig,
    *,
    fs: FileSystem | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> RunSummary:
    """Run the icon pipeline once.

    Args:
        config: Invocation parameters
        fs: Filesystem to read and write through (local disk if None)
        clock: Monotonic clock for the run deadline

    Returns:
        RunSummary with counts, warnings and output locations

    Raises:
        SourceNotFoundError: source_dir is missing or unreadable
        DestUnwritableError: dest_dir can't be created or written
        PipelineTimeoutError: config.timeout_seconds elapsed mid-run
        InternalError: Rendering failed unexpectedly

    Example:
        >>> summary = run(PipelineConfig(source_dir=Path("icons"), dest_dir=Path("out")))
        >>> summary.processed, summary.skipped
        (12, 1)
    """
    fs = fs or RealFileSystem()
    log = get_logger(
        __name__, source_dir=str(config.source_dir), dest_dir=str(config.dest_dir)
    )
    deadline = Deadline(config.timeout_seconds, clock=clock)

    config.validate_paths()
    if _same_directory(config.source_dir, config.dest_dir):
        log.warning(
            "Destination is the source directory; generated files will be "
            "picked up as sources on the next run"
        )

    log.info(f"Building icons from {config.source_dir} into {config.dest_dir}")
    discovery = discover_icons(config.source_dir, fs, deadline)

    builder = StylesheetBuilder(
        class_prefix=config.class_prefix,
        inline_threshold_bytes=config.inline_threshold_bytes,
    )
    plan = builder.plan(discovery.assets)

    try:
        stylesheet = builder.render_stylesheet(plan)
        preview = (
            builder.render_preview(plan, config.stylesheet_name) if config.preview else None
        )
    except RenderError as e:
        raise InternalError(f"Rendering failed: {e}", path=config.stylesheet_path, cause=e) from e

    deadline.check("writing output")
    _prepare_dest(config.dest_dir, fs)

    copied_files: list[Path] = []
    for asset in plan.copies:
        deadline.check(f"copying {asset.filename}")
        written = _write(fs, config.dest_dir / asset.output_filename, asset.content)
        copied_files.append(written.path)

    stylesheet_result = _write(fs, config.stylesheet_path, stylesheet)
    log.info(
        f"Wrote {config.stylesheet_path} ({len(plan.rules)} rule(s), "
        f"{len(plan.copies)} copied asset(s))"
    )

    preview_path: Path | None = None
    if preview is not None:
        preview_path = _write(fs, config.preview_path, preview).path
        log.info(f"Wrote {preview_path}")

    if discovery.warnings:
        log.warning(f"Completed with {len(discovery.warnings)} warning(s)")

    return RunSummary(
        processed=len(plan.rules),
        skipped=discovery.skipped,
        warnings=discovery.warnings,
        stylesheet_path=stylesheet_result.path,
        stylesheet_sha256=stylesheet_result.content_sha256,
        inlined=plan.inlined_names,
        referenced=plan.referenced_names,
        copied_files=copied_files,
        preview_path=preview_path,
    )

"""Command-line interface for icon-pipeline.

``icon-pipeline build --src <dir> --dest <dir>`` turns a directory of SVG/PNG
icons into a stylesheet. Running ``icon-pipeline`` with no subcommand is the
same as ``build`` with defaults.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape

from icon_pipeline.core.assets.models import RunSummary
from icon_pipeline.core.config.loader import load_project_config
from icon_pipeline.core.config.models import PipelineConfig, ProjectConfig
from icon_pipeline.core.errors import ConfigError, InternalError, PipelineError
from icon_pipeline.core.pipeline import run
from icon_pipeline.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def _resolve_project_config(args: argparse.Namespace) -> ProjectConfig:
    """Merge the project file (if any) with command-line overrides.

    Flags win over the project file, which wins over built-in defaults.

    Raises:
        ConfigError: If the project file or the merged values are invalid
    """
    project = load_project_config(args.config)

    overrides: dict[str, Path] = {}
    if args.src is not None:
        overrides["source_dir"] = Path(args.src)
    if args.dest is not None:
        overrides["dest_dir"] = Path(args.dest)
    if not overrides:
        return project

    try:
        pipeline = PipelineConfig.model_validate(
            {**project.pipeline.model_dump(), **overrides}
        )
    except ValueError as e:
        raise ConfigError(f"Invalid directory argument: {e}", cause=e) from e
    return project.model_copy(update={"pipeline": pipeline})


def _print_summary(summary: RunSummary) -> None:
    for warning in summary.warnings:
        console.print(f"[yellow]WARNING[/yellow] {escape(str(warning))}", highlight=False)

    console.print(
        f"[green]✅ Stylesheet written:[/green] {escape(str(summary.stylesheet_path))}"
    )
    console.print(
        f"   Icons: {summary.processed} "
        f"(inlined {len(summary.inlined)}, copied {len(summary.referenced)}), "
        f"skipped: {summary.skipped}"
    )
    if summary.preview_path is not None:
        console.print(f"   Preview: {escape(str(summary.preview_path))}")
    if summary.warning_count:
        console.print(f"[yellow]⚠️  {summary.warning_count} warning(s)[/yellow]")


def build_icons(args: argparse.Namespace) -> int:
    """Run the build task.

    Args:
        args: Parsed arguments (src, dest, config)

    Returns:
        Exit code: 0 on success, the error's exit code on fatal failure
    """
    try:
        project = _resolve_project_config(args)
    except ConfigError as e:
        console.print(f"[red]ERROR: {escape(e.message)}[/red]")
        if e.path is not None:
            console.print(f"   Path: {escape(str(e.path))}")
        return e.exit_code

    configure_logging(
        level=project.logging.level,
        format_string=project.logging.format,
        filename=project.logging.filename,
        structured=project.logging.structured,
    )

    try:
        summary = run(project.pipeline)
    except PipelineError as e:
        console.print(f"[red]ERROR ({e.kind}): {escape(e.message)}[/red]")
        if e.path is not None:
            console.print(f"   Path: {escape(str(e.path))}")
        return e.exit_code
    except Exception as e:
        logger.exception("Unexpected failure during build")
        console.print(f"[red]ERROR (Internal): {escape(str(e))}[/red]")
        return InternalError.exit_code

    _print_summary(summary)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="icon-pipeline",
        description="Generate a CSS stylesheet from a directory of SVG/PNG icons",
    )
    p.set_defaults(cmd=None, src=None, dest=None, config=None)
    sub = p.add_subparsers(dest="cmd")

    build = sub.add_parser("build", help="Build the icon stylesheet (default task)")
    build.add_argument("--src", help="Source directory of icons (default: icons/)")
    build.add_argument(
        "--dest", help="Destination directory for the stylesheet (default: stylesheets/icons/)"
    )
    build.add_argument(
        "--config",
        help="Project config file (.yaml/.yml/.json); "
        "defaults to icon-pipeline.yaml|yml|json in the working directory if present",
    )

    return p


def cli(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch; returns the process exit code."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    # "build" is the only task and also the default when no subcommand is given
    return build_icons(args)


def main() -> None:
    """Main entry point for CLI."""
    sys.exit(cli())

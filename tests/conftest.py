"""Shared pytest fixtures for icon-pipeline tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import logging
from pathlib import Path

import pytest

from icon_pipeline.core.config.models import PipelineConfig
from tests.fixtures.icons import make_png, make_svg

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Empty source directory for icons."""
    path = tmp_path / "icons"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    """Destination directory path (not created)."""
    return tmp_path / "stylesheets" / "icons"


@pytest.fixture
def config(source_dir: Path, dest_dir: Path) -> PipelineConfig:
    """PipelineConfig pointing at the temporary source/dest pair."""
    return PipelineConfig(source_dir=source_dir, dest_dir=dest_dir)


# ============================================================================
# Icon Fixtures
# ============================================================================


@pytest.fixture
def add_svg(source_dir: Path) -> Callable[..., Path]:
    """Write an SVG into the source directory: add_svg("a.svg", size=100)."""

    def _add(filename: str, width: int = 24, height: int = 24, size: int | None = None) -> Path:
        path = source_dir / filename
        path.write_bytes(make_svg(width=width, height=height, size=size))
        return path

    return _add


@pytest.fixture
def add_png(source_dir: Path) -> Callable[..., Path]:
    """Write a PNG into the source directory: add_png("b.png", 16, 16)."""

    def _add(
        filename: str, width: int = 16, height: int = 16, noise_seed: int | None = None
    ) -> Path:
        path = source_dir / filename
        path.write_bytes(make_png(width=width, height=height, noise_seed=noise_seed))
        return path

    return _add


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo configure_logging() calls made during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

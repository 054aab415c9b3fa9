"""Tests for the pipeline runner."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

import pytest

from icon_pipeline.core.assets.models import WarningKind
from icon_pipeline.core.config.models import PipelineConfig
from icon_pipeline.core.errors import (
    DestUnwritableError,
    InternalError,
    PipelineTimeoutError,
    SourceNotFoundError,
)
from icon_pipeline.core.io import RealFileSystem, WriteResult
from icon_pipeline.core.pipeline import run
from icon_pipeline.core.stylesheet.builder import StylesheetBuilder
from icon_pipeline.core.stylesheet.renderer import RenderError


class NoMkdirFileSystem(RealFileSystem):
    """RealFileSystem whose mkdirs always fails."""

    def mkdirs(self, path: Path, exist_ok: bool = True) -> None:
        raise PermissionError(13, "Permission denied", str(path))


class NoWriteFileSystem(RealFileSystem):
    """RealFileSystem whose writes always fail."""

    def write_bytes(self, path: Path, content: bytes) -> WriteResult:
        raise OSError(28, "No space left on device", str(path))


class SteppingClock:
    """Clock that advances by ``step`` seconds on every read."""

    def __init__(self, step: float) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


class TestRun:
    """Tests for run()."""

    def test_writes_stylesheet(
        self, config: PipelineConfig, add_svg: Callable[..., Path]
    ) -> None:
        add_svg("home.svg")

        summary = run(config)

        assert summary.stylesheet_path == config.dest_dir / "icons.css"
        assert summary.stylesheet_path.is_file()
        assert summary.processed == 1
        assert summary.skipped == 0
        assert summary.inlined == ["home"]
        assert summary.referenced == []
        assert summary.copied_files == []
        assert len(summary.stylesheet_sha256) == 64

    def test_creates_nested_destination(self, config: PipelineConfig) -> None:
        assert not config.dest_dir.exists()
        run(config)
        assert config.dest_dir.is_dir()

    def test_copies_large_assets(
        self, config: PipelineConfig, add_png: Callable[..., Path]
    ) -> None:
        source = add_png("Big Photo.png", 64, 64, noise_seed=1)
        assert source.stat().st_size >= 8192

        summary = run(config)

        copied = config.dest_dir / "big-photo.png"
        assert summary.copied_files == [copied]
        assert copied.read_bytes() == source.read_bytes()
        assert 'url("big-photo.png")' in summary.stylesheet_path.read_text()

    def test_summary_collects_warnings(
        self, config: PipelineConfig, source_dir: Path, add_svg: Callable[..., Path]
    ) -> None:
        add_svg("a.svg")
        (source_dir / "b.gif").write_bytes(b"GIF89a")

        summary = run(config)

        assert summary.processed == 1
        assert summary.skipped == 1
        assert [w.kind for w in summary.warnings] == [WarningKind.UNSUPPORTED_FORMAT]

    def test_preview_written_when_enabled(
        self, source_dir: Path, dest_dir: Path, add_svg: Callable[..., Path]
    ) -> None:
        add_svg("home.svg")
        config = PipelineConfig(source_dir=source_dir, dest_dir=dest_dir, preview=True)

        summary = run(config)

        assert summary.preview_path == dest_dir / "preview.html"
        assert "icon-home" in summary.preview_path.read_text()

    def test_no_preview_by_default(self, config: PipelineConfig) -> None:
        summary = run(config)
        assert summary.preview_path is None
        assert not (config.dest_dir / "preview.html").exists()

    def test_non_finite_svg_size_is_left_out_of_css(
        self, config: PipelineConfig, source_dir: Path
    ) -> None:
        (source_dir / "a.svg").write_bytes(
            b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 nan 16"/>'
        )

        summary = run(config)

        css = summary.stylesheet_path.read_text()
        assert ".icon-a {" in css
        assert "nanpx" not in css and "width:" not in css and "height:" not in css
        assert [w.kind for w in summary.warnings] == [WarningKind.MALFORMED_IMAGE]
        assert summary.processed == 1 and summary.skipped == 0

    def test_log_records_carry_directories(
        self, config: PipelineConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="icon_pipeline.core.pipeline.runner"):
            run(config)

        records = [r for r in caplog.records if r.name == "icon_pipeline.core.pipeline.runner"]
        assert records
        assert all(r.source_dir == str(config.source_dir) for r in records)
        assert all(r.dest_dir == str(config.dest_dir) for r in records)

    def test_custom_stylesheet_name_and_prefix(
        self, source_dir: Path, dest_dir: Path, add_svg: Callable[..., Path]
    ) -> None:
        add_svg("home.svg")
        config = PipelineConfig(
            source_dir=source_dir,
            dest_dir=dest_dir,
            stylesheet_name="sprites.css",
            class_prefix="i-",
        )

        summary = run(config)

        assert summary.stylesheet_path == dest_dir / "sprites.css"
        assert ".i-home {" in summary.stylesheet_path.read_text()


class TestRunFailures:
    """Tests for fatal failures in run()."""

    def test_missing_source_leaves_dest_untouched(self, tmp_path: Path, dest_dir: Path) -> None:
        config = PipelineConfig(source_dir=tmp_path / "missing", dest_dir=dest_dir)

        with pytest.raises(SourceNotFoundError):
            run(config)

        assert not dest_dir.exists()

    def test_dest_is_a_file(self, source_dir: Path, tmp_path: Path) -> None:
        dest = tmp_path / "taken"
        dest.write_text("file")

        with pytest.raises(DestUnwritableError, match="not a directory") as exc_info:
            run(PipelineConfig(source_dir=source_dir, dest_dir=dest))

        assert exc_info.value.exit_code == 2
        assert exc_info.value.path == dest

    def test_dest_cannot_be_created(self, config: PipelineConfig) -> None:
        with pytest.raises(DestUnwritableError, match="could not be created"):
            run(config, fs=NoMkdirFileSystem())

    def test_write_failure(self, config: PipelineConfig) -> None:
        with pytest.raises(DestUnwritableError, match="Could not write output") as exc_info:
            run(config, fs=NoWriteFileSystem())
        assert exc_info.value.path == config.stylesheet_path

    def test_timeout(
        self, source_dir: Path, dest_dir: Path, add_svg: Callable[..., Path]
    ) -> None:
        add_svg("a.svg")
        config = PipelineConfig(source_dir=source_dir, dest_dir=dest_dir, timeout_seconds=1)

        with pytest.raises(PipelineTimeoutError) as exc_info:
            run(config, clock=SteppingClock(step=5.0))

        assert exc_info.value.exit_code == 4
        assert not dest_dir.exists()

    def test_render_failure_is_internal(
        self, config: PipelineConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(self: StylesheetBuilder, plan: object) -> str:
            raise RenderError("boom")

        monkeypatch.setattr(StylesheetBuilder, "render_stylesheet", fail)

        with pytest.raises(InternalError, match="Rendering failed") as exc_info:
            run(config)

        assert exc_info.value.exit_code == 3
        assert not config.dest_dir.exists()

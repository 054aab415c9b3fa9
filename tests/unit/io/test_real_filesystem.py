"""Tests for RealFileSystem."""

from __future__ import annotations

import hashlib
from pathlib import Path
import stat

import pytest

from icon_pipeline.core.io import RealFileSystem, WriteResult


@pytest.fixture
def fs() -> RealFileSystem:
    return RealFileSystem()


class TestReads:
    """Tests for read and existence operations."""

    def test_existence_checks(self, fs: RealFileSystem, tmp_path: Path) -> None:
        file_path = tmp_path / "a.svg"
        file_path.write_bytes(b"<svg/>")

        assert fs.exists(file_path) and fs.is_file(file_path)
        assert fs.is_dir(tmp_path) and not fs.is_file(tmp_path)
        assert not fs.exists(tmp_path / "missing")

    def test_listdir_returns_names(self, fs: RealFileSystem, tmp_path: Path) -> None:
        (tmp_path / "b.svg").write_bytes(b"")
        (tmp_path / "a.png").write_bytes(b"")
        assert sorted(fs.listdir(tmp_path)) == ["a.png", "b.svg"]

    def test_listdir_missing_directory(self, fs: RealFileSystem, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            fs.listdir(tmp_path / "missing")


class TestAtomicWrites:
    """Tests for write_bytes() / write_text()."""

    def test_write_bytes_result(self, fs: RealFileSystem, tmp_path: Path) -> None:
        path = tmp_path / "icons.css"

        result = fs.write_bytes(path, b"hello world")

        assert isinstance(result, WriteResult)
        assert result.path == path
        assert result.bytes_written == 11
        assert result.content_sha256 == hashlib.sha256(b"hello world").hexdigest()
        assert path.read_bytes() == b"hello world"

    def test_write_text_encodes_utf8(self, fs: RealFileSystem, tmp_path: Path) -> None:
        path = tmp_path / "icons.css"
        result = fs.write_text(path, "/* ✓ */")
        assert path.read_bytes() == "/* ✓ */".encode()
        assert result.bytes_written == len("/* ✓ */".encode())

    def test_new_file_is_world_readable(self, fs: RealFileSystem, tmp_path: Path) -> None:
        path = tmp_path / "icons.css"
        fs.write_bytes(path, b"x")
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_overwrite_keeps_existing_mode(self, fs: RealFileSystem, tmp_path: Path) -> None:
        path = tmp_path / "icons.css"
        path.write_bytes(b"old")
        path.chmod(0o600)

        fs.write_bytes(path, b"new")

        assert path.read_bytes() == b"new"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_no_temp_files_left(self, fs: RealFileSystem, tmp_path: Path) -> None:
        fs.write_bytes(tmp_path / "a.css", b"a")
        fs.write_bytes(tmp_path / "a.css", b"b")
        assert [p.name for p in tmp_path.iterdir()] == ["a.css"]

    def test_missing_parent_raises(self, fs: RealFileSystem, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            fs.write_bytes(tmp_path / "missing" / "a.css", b"a")


class TestMkdirs:
    """Tests for mkdirs()."""

    def test_creates_parents(self, fs: RealFileSystem, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"
        fs.mkdirs(target)
        assert target.is_dir()

    def test_existing_ok(self, fs: RealFileSystem, tmp_path: Path) -> None:
        fs.mkdirs(tmp_path)

    def test_existing_not_ok(self, fs: RealFileSystem, tmp_path: Path) -> None:
        with pytest.raises(FileExistsError):
            fs.mkdirs(tmp_path, exist_ok=False)

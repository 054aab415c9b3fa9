"""Real filesystem implementation backed by the local disk."""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
import tempfile

from .models import WriteResult

logger = logging.getLogger(__name__)

_DEFAULT_FILE_MODE = 0o644


class RealFileSystem:
    """Blocking filesystem operations with atomic writes."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def listdir(self, path: Path) -> list[str]:
        return os.listdir(path)

    def write_bytes(self, path: Path, content: bytes) -> WriteResult:
        # Temp file lives in the target directory so os.replace stays on one device
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        # mkstemp creates 0600; keep an existing file's mode, else world-readable
        mode = path.stat().st_mode & 0o777 if path.exists() else _DEFAULT_FILE_MODE
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug(f"Wrote {len(content)} bytes to {path}")
        return WriteResult(
            path=path,
            bytes_written=len(content),
            content_sha256=hashlib.sha256(content).hexdigest(),
        )

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> WriteResult:
        return self.write_bytes(path, content.encode(encoding))

    def mkdirs(self, path: Path, exist_ok: bool = True) -> None:
        path.mkdir(parents=True, exist_ok=exist_ok)

"""Filesystem abstraction layer for the icon pipeline.

Example:
    >>> from pathlib import Path
    >>> from icon_pipeline.core.io import RealFileSystem
    >>> fs = RealFileSystem()
    >>> fs.mkdirs(Path("/tmp/out"))
    >>> result = fs.write_text(Path("/tmp/out/icons.css"), ".icon-a {}\\n")
    >>> result.bytes_written
    11
"""

from .impl_real import RealFileSystem
from .models import WriteResult
from .protocols import FileSystem

__all__ = [
    "FileSystem",
    "RealFileSystem",
    "WriteResult",
]

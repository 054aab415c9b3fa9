"""Protocol for filesystem operations used by the pipeline.

The pipeline is synchronous, so the protocol is blocking. Implementations
must provide atomic write semantics.
"""

from pathlib import Path
from typing import Protocol

from .models import WriteResult


class FileSystem(Protocol):
    """
    Protocol for blocking filesystem operations.

    All writes are atomic: readers never observe a partially written file.
    """

    # Existence checks
    def exists(self, path: Path) -> bool:
        """Check if path exists (file or directory)."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if path exists and is a file."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if path exists and is a directory."""
        ...

    # Read operations
    def read_bytes(self, path: Path) -> bytes:
        """
        Read file contents.

        Raises:
            FileNotFoundError: If file doesn't exist
            OSError: On read failure
        """
        ...

    def listdir(self, path: Path) -> list[str]:
        """
        List directory contents (names only, unsorted).

        Raises:
            FileNotFoundError: If directory doesn't exist
            OSError: On read failure
        """
        ...

    # Write operations (atomic)
    def write_bytes(self, path: Path, content: bytes) -> WriteResult:
        """
        Atomically write bytes to file.

        Uses temp file + atomic replace to ensure readers never
        observe partial writes.

        Raises:
            OSError: On write failure
        """
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> WriteResult:
        """Atomically write text to file (see write_bytes)."""
        ...

    # Directory operations
    def mkdirs(self, path: Path, exist_ok: bool = True) -> None:
        """
        Create directory and all parents.

        Raises:
            OSError: On creation failure
        """
        ...

"""Storage port interface for filesystem operations."""

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class StoragePort(Protocol):
    """Port interface for storage operations.

    Abstracts filesystem I/O to enable testing and alternative backends.

    Side effects: Reads/writes files.
    """

    def read_bytes(self, path: Path) -> bytes:
        """Read a file fully.

        Args:
            path: File path

        Returns:
            File contents

        Raises:
            SourceError: If the file cannot be read
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text file.

        Args:
            path: File path

        Returns:
            File contents as string

        Raises:
            SourceError: If the file cannot be read
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write UTF-8 text file, creating parent directories.

        Args:
            path: File path
            content: Content to write

        Raises:
            SinkError: If the directory or file cannot be written
        """
        ...

    def write_secrets(self, files: Mapping[Path, bytes]) -> None:
        """Write a set of key files with owner-only permissions.

        Either every file is written or none is; files they would replace
        are left untouched on failure. Parent directories must exist.

        Args:
            files: Target path to raw bytes

        Raises:
            KeyWriteError: If any file cannot be written
        """
        ...

"""Filesystem-backed storage port implementation."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from rcli.app.ports import StoragePort
from rcli.errors import SinkError, SourceError
from rcli.utils.crypto import write_secure_files


class FileSystemStorageAdapter(StoragePort):
    """Adapter that performs direct filesystem operations."""

    def read_bytes(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise SourceError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    def read_text(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceError(f"Cannot read {path}: not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise SourceError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    def write_text(self, path: Path, content: str) -> None:
        destination = Path(path)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise SinkError(f"Cannot write {path}: {exc.strerror or exc}") from exc

    def write_secrets(self, files: Mapping[Path, bytes]) -> None:
        write_secure_files({Path(path): data for path, data in files.items()})

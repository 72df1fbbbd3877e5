"""Utilities for key material handling."""

from __future__ import annotations

import os
import secrets
from collections.abc import Mapping
from pathlib import Path

from rcli.errors import KeyLengthError, KeyWriteError


def write_secure_file(path: Path, data: bytes, *, mode: int = 0o600) -> None:
    """Write ``data`` to ``path`` in one call and restrict permissions.

    The parent directory must already exist; it is never created here.

    Args:
        path: Target file path
        data: Bytes to persist
        mode: File mode to apply (POSIX style)

    Raises:
        KeyWriteError: If the file cannot be created or written
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    except OSError as exc:
        raise KeyWriteError(f"Cannot write {path}: {exc.strerror or exc}") from exc

    try:
        written = os.write(fd, data)
    except OSError as exc:
        raise KeyWriteError(f"Cannot write {path}: {exc.strerror or exc}") from exc
    finally:
        os.close(fd)

    if written != len(data):
        raise KeyWriteError(f"Short write to {path}: {written} of {len(data)} bytes")

    try:
        os.chmod(path, mode)
    except PermissionError:
        # Windows may not support POSIX-style chmod; best effort only.
        pass


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_name(f".{path.name}.{secrets.token_hex(8)}.{suffix}")


def write_secure_files(files: Mapping[Path, bytes], *, mode: int = 0o600) -> None:
    """Write several key files so that either all of them land or none do.

    Every file is staged under a temporary name beside its target and moved
    into place only once all of them are on disk. If a move fails, files
    already moved are removed and any files they replaced are restored.

    Args:
        files: Target path to bytes, in write order
        mode: File mode to apply (POSIX style)

    Raises:
        KeyWriteError: If any file cannot be written
    """
    staged: list[tuple[Path, Path]] = []
    for path, data in files.items():
        temp = _sibling(path, "tmp")
        try:
            write_secure_file(temp, data, mode=mode)
        except KeyWriteError as exc:
            for staged_temp, _ in staged:
                staged_temp.unlink(missing_ok=True)
            reason = getattr(exc.__cause__, "strerror", None) or exc
            raise KeyWriteError(f"Cannot write {path}: {reason}") from exc
        staged.append((temp, path))

    # (target, backup of the file it replaced)
    moved: list[tuple[Path, Path | None]] = []
    placed: list[Path] = []
    for temp, path in staged:
        try:
            backup = None
            if path.is_file():
                backup = _sibling(path, "bak")
                os.replace(path, backup)
            moved.append((path, backup))
            os.replace(temp, path)
            placed.append(path)
        except OSError as exc:
            for staged_temp, _ in staged:
                staged_temp.unlink(missing_ok=True)
            for placed_path in placed:
                placed_path.unlink(missing_ok=True)
            for moved_path, moved_backup in moved:
                if moved_backup is not None:
                    os.replace(moved_backup, moved_path)
            raise KeyWriteError(f"Cannot write {path}: {exc.strerror or exc}") from exc

    for _, backup in moved:
        if backup is not None:
            backup.unlink(missing_ok=True)


def generate_secret(length: int = 32) -> bytes:
    """Return ``length`` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(length)


def require_key_length(key: bytes, expected: int, label: str) -> bytes:
    """Return ``key`` unchanged, or raise if it is not ``expected`` bytes long."""
    if len(key) != expected:
        raise KeyLengthError(label, expected, len(key))
    return key

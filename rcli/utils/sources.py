"""Byte-stream sources: a file path or ``-`` for standard input."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from rcli.errors import SourceError

STDIN_SENTINEL = "-"


def is_stdin(location: str | Path) -> bool:
    """Return True when ``location`` names standard input."""
    return str(location) == STDIN_SENTINEL


@contextmanager
def open_source(location: str | Path) -> Iterator[BinaryIO]:
    """Open ``location`` for binary reading.

    Standard input is looked up at call time and left open on exit; a file
    handle is always closed, whether the caller's block succeeds or raises.
    No existence check is made up front.

    Raises:
        SourceError: If the file cannot be opened
    """
    if is_stdin(location):
        yield sys.stdin.buffer
        return

    try:
        handle = open(location, "rb")
    except OSError as exc:
        raise SourceError(f"Cannot open {location}: {exc.strerror or exc}") from exc

    with handle:
        yield handle


def read_source(location: str | Path) -> bytes:
    """Read the full content of ``location`` into memory."""
    with open_source(location) as handle:
        try:
            return handle.read()
        except OSError as exc:
            raise SourceError(f"Cannot read {location}: {exc.strerror or exc}") from exc

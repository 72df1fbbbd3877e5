"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from rcli.app.ports import SignerPort, TextSignFormat

from .blake3_signer import Blake3Signer
from .ed25519_signer import Ed25519Signer
from .storage import FileSystemStorageAdapter


def get_signer(format: TextSignFormat | str) -> SignerPort:
    """Return the signer adapter for ``format``."""
    fmt = TextSignFormat.parse(format)
    if fmt is TextSignFormat.BLAKE3:
        return Blake3Signer()
    return Ed25519Signer()


__all__ = [
    "Blake3Signer",
    "Ed25519Signer",
    "FileSystemStorageAdapter",
    "get_signer",
]

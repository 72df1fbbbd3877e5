"""Signer port interface and the algorithm tag it is selected by."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from rcli.errors import ConfigurationError


class TextSignFormat(str, Enum):
    """Signature algorithm tag.

    ``blake3`` is a keyed hash: one 32-byte secret, 32-byte tag.
    ``ed25519`` signs with a 32-byte private key, verifies with the derived
    32-byte public key, and produces a 64-byte signature.
    """

    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: "str | TextSignFormat") -> "TextSignFormat":
        """Map a case-sensitive token to a format.

        Raises:
            ConfigurationError: If ``value`` names no known format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Invalid format {value!r} (expected one of: {choices})"
            ) from exc

    @property
    def signing_key_length(self) -> int:
        return 32

    @property
    def verifying_key_length(self) -> int:
        return 32

    @property
    def tag_length(self) -> int:
        return 32 if self is TextSignFormat.BLAKE3 else 64

    @property
    def is_symmetric(self) -> bool:
        return self is TextSignFormat.BLAKE3

    def __str__(self) -> str:
        return self.value


class SignerPort(Protocol):
    """Port interface for tag derivation and verification.

    Side effects: None (pure computation over in-memory bytes).
    """

    format: TextSignFormat

    def sign(self, data: bytes, key: bytes) -> bytes:
        """Derive the raw tag for ``data``.

        Args:
            data: Message bytes (may be empty)
            key: Signing key of ``format.signing_key_length`` bytes

        Returns:
            Raw tag of ``format.tag_length`` bytes

        Raises:
            KeyLengthError: If ``key`` has the wrong length
        """
        ...

    def verify(self, data: bytes, key: bytes, tag: bytes) -> bool:
        """Check ``tag`` against ``data``.

        Args:
            data: Message bytes
            key: Verifying key of ``format.verifying_key_length`` bytes
            tag: Raw tag; a wrong-sized tag is rejected without comparison

        Returns:
            True only if the tag is valid
        """
        ...

    def generate(self) -> dict[str, bytes]:
        """Create fresh key material.

        Returns:
            Mapping of conventional file name to raw key bytes
        """
        ...

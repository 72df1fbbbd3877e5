"""Text signing service: key generation, signing and verification.

All filesystem access goes through the storage port; message bytes come
from the byte-stream source resolver. Signing and verification are
stateless and idempotent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from rcli.app.ports import SignerPort, StoragePort, TextSignFormat
from rcli.errors import TagDecodeError
from rcli.utils.codec import decode_tag, encode_tag
from rcli.utils.crypto import require_key_length
from rcli.utils.sources import read_source

logger = logging.getLogger(__name__)


class VerificationResult(BaseModel):
    """Outcome of a verification.

    ``detail`` explains a negative result for humans only. Malformed
    signature text and a cryptographic mismatch both yield ``valid=False``.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    format: TextSignFormat
    detail: str | None = None

    def __bool__(self) -> bool:
        return self.valid


class GeneratedKeys(BaseModel):
    """Key files written by :meth:`TextService.generate`."""

    model_config = ConfigDict(frozen=True)

    format: TextSignFormat
    paths: list[Path]


class TextService:
    """Orchestrates signing, verification and key generation."""

    def __init__(
        self,
        *,
        storage_port: StoragePort,
        signer_factory: Callable[[TextSignFormat], SignerPort],
        default_format: TextSignFormat | str = TextSignFormat.BLAKE3,
        key_dir_factory: Callable[[], Path] | None = None,
    ) -> None:
        """Initialize text service.

        Args:
            storage_port: Filesystem operations port
            signer_factory: Returns the signer adapter for a format
            default_format: Format used when a call passes ``None``
            key_dir_factory: Supplies the output directory when
                :meth:`generate` is called without one
        """
        self.storage = storage_port
        self._signer_factory = signer_factory
        self.default_format = TextSignFormat.parse(default_format)
        self._key_dir_factory = key_dir_factory

    def resolve_format(self, format: TextSignFormat | str | None) -> TextSignFormat:
        """Return ``format`` as a tag, falling back to the default."""
        if format is None:
            return self.default_format
        return TextSignFormat.parse(format)

    def signer_for(self, format: TextSignFormat | str | None) -> SignerPort:
        return self._signer_factory(self.resolve_format(format))

    def load_key(self, key_path: Path) -> bytes:
        """Read raw key bytes; nothing is cached between calls."""
        key = self.storage.read_bytes(key_path)
        logger.debug("Loaded %d-byte key from %s", len(key), key_path)
        return key

    # ------------------------------------------------------------------ #
    # In-memory operations
    # ------------------------------------------------------------------ #

    def sign_message(
        self, message: bytes, key: bytes, format: TextSignFormat | str | None = None
    ) -> str:
        """Sign ``message`` and return the encoded tag.

        Raises:
            ConfigurationError: If ``format`` is unknown
            KeyLengthError: If ``key`` does not fit the format
        """
        fmt = self.resolve_format(format)
        require_key_length(key, fmt.signing_key_length, f"{fmt} signing key")
        return self._sign(fmt, message, key)

    def verify_message(
        self,
        message: bytes,
        key: bytes,
        signature: str,
        format: TextSignFormat | str | None = None,
    ) -> VerificationResult:
        """Verify encoded ``signature`` over ``message``.

        Raises:
            ConfigurationError: If ``format`` is unknown
            KeyLengthError: If ``key`` does not fit the format
        """
        fmt = self.resolve_format(format)
        require_key_length(key, fmt.verifying_key_length, f"{fmt} verifying key")
        return self._verify(fmt, message, key, signature)

    def _sign(self, fmt: TextSignFormat, message: bytes, key: bytes) -> str:
        tag = self.signer_for(fmt).sign(message, key)
        logger.debug("Produced %d-byte %s tag over %d bytes", len(tag), fmt, len(message))
        return encode_tag(tag)

    def _verify(
        self, fmt: TextSignFormat, message: bytes, key: bytes, signature: str
    ) -> VerificationResult:
        signer = self.signer_for(fmt)

        try:
            tag = decode_tag(signature)
        except TagDecodeError as exc:
            logger.warning("Rejecting signature text: %s", exc)
            return VerificationResult(valid=False, format=fmt, detail=str(exc))

        if len(tag) != fmt.tag_length:
            detail = f"Malformed signature: expected {fmt.tag_length} bytes, got {len(tag)}"
            logger.warning("Rejecting signature text: %s", detail)
            return VerificationResult(valid=False, format=fmt, detail=detail)

        valid = signer.verify(message, key, tag)
        logger.debug("Verification over %d bytes with %s: %s", len(message), fmt, valid)
        return VerificationResult(
            valid=valid,
            format=fmt,
            detail=None if valid else "Signature does not match message and key",
        )

    # ------------------------------------------------------------------ #
    # Source and key-file operations
    # ------------------------------------------------------------------ #

    def sign(
        self,
        input: str | Path,
        key_path: Path,
        format: TextSignFormat | str | None = None,
    ) -> str:
        """Sign the message read from ``input`` (a path or ``-``) with the key file.

        The key is checked before the message is read, so a bad key never
        consumes standard input.
        """
        fmt = self.resolve_format(format)
        key = self.load_key(key_path)
        require_key_length(key, fmt.signing_key_length, f"{fmt} signing key")
        message = read_source(input)
        return self._sign(fmt, message, key)

    def verify(
        self,
        input: str | Path,
        key_path: Path,
        signature: str,
        format: TextSignFormat | str | None = None,
    ) -> VerificationResult:
        """Verify ``signature`` over the message read from ``input``."""
        fmt = self.resolve_format(format)
        key = self.load_key(key_path)
        require_key_length(key, fmt.verifying_key_length, f"{fmt} verifying key")
        message = read_source(input)
        return self._verify(fmt, message, key, signature)

    def generate(
        self,
        format: TextSignFormat | str | None = None,
        output_dir: Path | None = None,
    ) -> GeneratedKeys:
        """Create fresh key material and write each artifact as raw bytes.

        All files of a keypair are written together: on failure none of
        them is left behind and existing key files keep their content.

        Raises:
            KeyWriteError: If any key file cannot be written
        """
        fmt = self.resolve_format(format)
        if output_dir is None:
            if self._key_dir_factory is None:
                raise ValueError("output_dir is required when no default key directory is set")
            output_dir = self._key_dir_factory()

        artifacts = self.signer_for(fmt).generate()
        files = {Path(output_dir) / name: data for name, data in artifacts.items()}
        self.storage.write_secrets(files)
        for path in files:
            logger.info("Wrote %s key file %s", fmt, path)

        return GeneratedKeys(format=fmt, paths=list(files))

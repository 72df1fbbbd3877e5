"""Ed25519 signer adapter backed by ``cryptography``."""

from __future__ import annotations

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from rcli.app.ports import SignerPort, TextSignFormat
from rcli.errors import FormatError
from rcli.utils.crypto import require_key_length

logger = logging.getLogger(__name__)


class Ed25519Signer(SignerPort):
    """Asymmetric signer: raw 32-byte private key signs, raw 32-byte public key verifies.

    Signatures are deterministic (RFC 8032), so the same key and message
    always produce the same 64 bytes.
    """

    format = TextSignFormat.ED25519
    signing_key_filename = "ed25519.sk"
    verifying_key_filename = "ed25519.pk"

    def sign(self, data: bytes, key: bytes) -> bytes:
        require_key_length(key, self.format.signing_key_length, "ed25519 signing key")
        private_key = Ed25519PrivateKey.from_private_bytes(key)
        return private_key.sign(data)

    def verify(self, data: bytes, key: bytes, tag: bytes) -> bool:
        require_key_length(key, self.format.verifying_key_length, "ed25519 verifying key")
        if len(tag) != self.format.tag_length:
            logger.debug("Rejecting %d-byte ed25519 signature", len(tag))
            return False

        try:
            public_key = Ed25519PublicKey.from_public_bytes(key)
        except ValueError as exc:
            raise FormatError(f"Invalid ed25519 verifying key: {exc}") from exc

        try:
            public_key.verify(tag, data)
        except InvalidSignature:
            return False
        return True

    def generate(self) -> dict[str, bytes]:
        private_key = Ed25519PrivateKey.generate()
        signing_key = private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        verifying_key = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return {
            self.signing_key_filename: signing_key,
            self.verifying_key_filename: verifying_key,
        }

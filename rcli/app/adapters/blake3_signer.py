"""Keyed BLAKE3 signer adapter."""

from __future__ import annotations

import hmac
import logging

import blake3

from rcli.app.ports import SignerPort, TextSignFormat
from rcli.utils.crypto import generate_secret, require_key_length

logger = logging.getLogger(__name__)


class Blake3Signer(SignerPort):
    """Symmetric MAC: BLAKE3 in keyed-hash mode with a shared 32-byte secret."""

    format = TextSignFormat.BLAKE3
    key_filename = "blake3.txt"

    def sign(self, data: bytes, key: bytes) -> bytes:
        require_key_length(key, self.format.signing_key_length, "blake3 key")
        return blake3.blake3(data, key=key).digest()

    def verify(self, data: bytes, key: bytes, tag: bytes) -> bool:
        require_key_length(key, self.format.verifying_key_length, "blake3 key")
        if len(tag) != self.format.tag_length:
            logger.debug("Rejecting %d-byte blake3 tag", len(tag))
            return False
        expected = blake3.blake3(data, key=key).digest()
        return hmac.compare_digest(expected, tag)

    def generate(self) -> dict[str, bytes]:
        return {self.key_filename: generate_secret(self.format.signing_key_length)}

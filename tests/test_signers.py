"""Tests for the blake3 and ed25519 signer adapters."""

import pytest

from rcli.app.adapters import Blake3Signer, Ed25519Signer, get_signer
from rcli.app.ports import TextSignFormat
from rcli.errors import ConfigurationError, KeyLengthError

ZERO_KEY = bytes(32)
HELLO_TAG_HEX = "e0f68bfec361216ec02fc15736643a70471d96260b0fe6f273a909bb8b6dbd81"

# RFC 8032, section 7.1, TEST 1 (empty message).
RFC8032_SECRET = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
RFC8032_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
    "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def _flip(data: bytes, index: int) -> bytes:
    mutated = bytearray(data)
    mutated[index] ^= 0x01
    return bytes(mutated)


def test_get_signer_selects_adapter():
    assert isinstance(get_signer(TextSignFormat.BLAKE3), Blake3Signer)
    assert isinstance(get_signer("ed25519"), Ed25519Signer)


def test_get_signer_rejects_unknown_token():
    with pytest.raises(ConfigurationError):
        get_signer("sha256")


def test_format_tokens_are_case_sensitive():
    with pytest.raises(ConfigurationError):
        TextSignFormat.parse("BLAKE3")
    assert TextSignFormat.parse("blake3") is TextSignFormat.BLAKE3


def test_format_sizes():
    assert TextSignFormat.BLAKE3.tag_length == 32
    assert TextSignFormat.ED25519.tag_length == 64
    assert TextSignFormat.ED25519.signing_key_length == 32
    assert TextSignFormat.ED25519.verifying_key_length == 32
    assert TextSignFormat.BLAKE3.is_symmetric
    assert not TextSignFormat.ED25519.is_symmetric


def test_blake3_keyed_golden_digest():
    """Keyed BLAKE3 of ``hello`` under an all-zero key is fixed."""
    signer = Blake3Signer()

    tag = signer.sign(b"hello", ZERO_KEY)

    assert tag.hex() == HELLO_TAG_HEX
    assert signer.sign(b"hello", ZERO_KEY) == tag


def test_blake3_verify_round_trip_and_mutation():
    signer = Blake3Signer()
    key = signer.generate()["blake3.txt"]
    tag = signer.sign(b"payload", key)

    assert signer.verify(b"payload", key, tag)
    for index in range(len(tag)):
        assert not signer.verify(b"payload", key, _flip(tag, index))


def test_blake3_rejects_wrong_key_length():
    signer = Blake3Signer()

    with pytest.raises(KeyLengthError) as excinfo:
        signer.sign(b"payload", b"short")

    assert excinfo.value.expected == 32
    assert excinfo.value.actual == 5


def test_blake3_rejects_wrong_tag_length():
    signer = Blake3Signer()
    tag = signer.sign(b"payload", ZERO_KEY)

    assert not signer.verify(b"payload", ZERO_KEY, tag[:-1])
    assert not signer.verify(b"payload", ZERO_KEY, tag + b"\x00")


def test_blake3_generate_is_fresh():
    signer = Blake3Signer()

    first = signer.generate()["blake3.txt"]
    second = signer.generate()["blake3.txt"]

    assert len(first) == 32
    assert first != second


def test_ed25519_rfc8032_vector():
    signer = Ed25519Signer()

    signature = signer.sign(b"", RFC8032_SECRET)

    assert signature == RFC8032_SIGNATURE
    assert signer.verify(b"", RFC8032_PUBLIC, signature)


def test_ed25519_keypair_round_trip():
    signer = Ed25519Signer()
    keys = signer.generate()
    signing_key = keys["ed25519.sk"]
    verifying_key = keys["ed25519.pk"]

    assert len(signing_key) == 32
    assert len(verifying_key) == 32

    signature = signer.sign(b"test message", signing_key)

    assert len(signature) == 64
    assert signer.verify(b"test message", verifying_key, signature)
    assert not signer.verify(b"test messagf", verifying_key, signature)
    assert not signer.verify(b"test message", verifying_key, _flip(signature, 10))


def test_ed25519_foreign_public_key_fails():
    signer = Ed25519Signer()
    ours = signer.generate()
    theirs = signer.generate()

    signature = signer.sign(b"test message", ours["ed25519.sk"])

    assert not signer.verify(b"test message", theirs["ed25519.pk"], signature)


def test_ed25519_is_deterministic():
    signer = Ed25519Signer()
    signing_key = signer.generate()["ed25519.sk"]

    assert signer.sign(b"same", signing_key) == signer.sign(b"same", signing_key)


def test_ed25519_rejects_wrong_lengths():
    signer = Ed25519Signer()
    keys = signer.generate()
    signature = signer.sign(b"msg", keys["ed25519.sk"])

    with pytest.raises(KeyLengthError):
        signer.sign(b"msg", keys["ed25519.sk"] + b"\x00")
    with pytest.raises(KeyLengthError):
        signer.verify(b"msg", keys["ed25519.pk"][:16], signature)
    assert not signer.verify(b"msg", keys["ed25519.pk"], signature[:32])

"""Base64 codecs for signature text and the ``base64`` command.

Signature tags always travel as URL-safe base64 without padding. Decoding is
strict: only the expected alphabet is accepted and the text must be the
canonical encoding of the decoded bytes, so two different strings never
decode to the same tag.
"""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum

from rcli.errors import ConversionError, TagDecodeError

_URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")
_STANDARD_ALPHABET = re.compile(r"[A-Za-z0-9+/]*")


class Base64Format(str, Enum):
    """Alphabet used by the ``base64`` command."""

    STANDARD = "standard"
    URLSAFE = "urlsafe"


def _strict_decode(text: str, *, urlsafe: bool) -> bytes:
    """Decode unpadded base64 ``text``; raise ValueError on any irregularity."""
    pattern = _URLSAFE_ALPHABET if urlsafe else _STANDARD_ALPHABET
    if not pattern.fullmatch(text):
        raise ValueError("invalid base64 character")
    if len(text) % 4 == 1:
        raise ValueError(f"invalid base64 length {len(text)}")

    padded = text + "=" * (-len(text) % 4)
    try:
        if urlsafe:
            raw = base64.urlsafe_b64decode(padded)
        else:
            raw = base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc

    canonical = base64.b64encode(raw).decode("ascii").rstrip("=")
    if urlsafe:
        canonical = canonical.replace("+", "-").replace("/", "_")
    if canonical != text:
        raise ValueError("non-canonical base64 encoding")
    return raw


def encode_tag(raw: bytes) -> str:
    """Encode raw tag bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_tag(text: str) -> bytes:
    """Decode signature text produced by :func:`encode_tag`.

    Surrounding whitespace is ignored; padding characters are rejected.

    Raises:
        TagDecodeError: If ``text`` is not canonical unpadded URL-safe base64
    """
    try:
        return _strict_decode(text.strip(), urlsafe=True)
    except ValueError as exc:
        raise TagDecodeError(f"Malformed signature: {exc}") from exc


def encode(data: bytes, format: Base64Format = Base64Format.STANDARD) -> str:
    """Encode ``data``: padded standard alphabet, or unpadded URL-safe."""
    if format is Base64Format.URLSAFE:
        return encode_tag(data)
    return base64.b64encode(data).decode("ascii")


def decode(text: str, format: Base64Format = Base64Format.STANDARD) -> bytes:
    """Decode ``text`` in either alphabet, tolerating line wraps and missing padding.

    Raises:
        ConversionError: If ``text`` is not valid base64 for ``format``
    """
    cleaned = "".join(text.split()).rstrip("=")
    try:
        return _strict_decode(cleaned, urlsafe=format is Base64Format.URLSAFE)
    except ValueError as exc:
        raise ConversionError(f"Invalid {format.value} base64 input: {exc}") from exc

"""Utility modules for common operations."""

from rcli.utils.codec import Base64Format, decode, decode_tag, encode, encode_tag
from rcli.utils.crypto import (
    generate_secret,
    require_key_length,
    write_secure_file,
    write_secure_files,
)
from rcli.utils.genpass import generate_password
from rcli.utils.sources import STDIN_SENTINEL, open_source, read_source

__all__ = [
    "Base64Format",
    "STDIN_SENTINEL",
    "decode",
    "decode_tag",
    "encode",
    "encode_tag",
    "generate_password",
    "generate_secret",
    "open_source",
    "read_source",
    "require_key_length",
    "write_secure_file",
    "write_secure_files",
]

"""Exception hierarchy shared by services, adapters and the CLI layer.

The CLI maps every :class:`RcliError` to a red ``Error:`` line and exit code 1.
A failed signature check is not an error; it is a ``False`` verification result.
"""

from __future__ import annotations


class RcliError(Exception):
    """Base class for failures that stop an invocation."""


class ConfigurationError(RcliError):
    """Unknown format token or an invalid option combination."""


class RcliIOError(RcliError):
    """A message, key, or output location could not be read or written."""


class SourceError(RcliIOError):
    """Raised when a message or key source cannot be opened or read."""


class KeyWriteError(RcliIOError):
    """Raised when generated key material cannot be persisted."""


class SinkError(RcliIOError):
    """Raised when converted output cannot be written."""


class FormatError(RcliError):
    """Input bytes do not have the shape the selected algorithm requires."""


class KeyLengthError(FormatError):
    """Key material has the wrong length for the selected algorithm."""

    def __init__(self, label: str, expected: int, actual: int) -> None:
        super().__init__(f"Invalid {label}: expected {expected} bytes, got {actual}")
        self.label = label
        self.expected = expected
        self.actual = actual


class TagDecodeError(FormatError):
    """Signature text is not valid unpadded URL-safe base64."""


class ConversionError(RcliError):
    """CSV or base64 input could not be converted."""

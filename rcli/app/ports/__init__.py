"""Port interfaces for the rcli application layer.

These protocol interfaces define contracts for adapters.
Services depend on these ports, never on concrete implementations.
"""

__all__ = [
    "SignerPort",
    "StoragePort",
    "TextSignFormat",
]

from rcli.app.ports.signer import SignerPort, TextSignFormat
from rcli.app.ports.storage import StoragePort

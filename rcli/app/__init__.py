"""Application layer for rcli.

This layer orchestrates domain logic without direct filesystem access.
All side effects are delegated to adapters via port interfaces.
"""

__all__ = [
    "CsvService",
    "GeneratedKeys",
    "OutputFormat",
    "TextService",
    "VerificationResult",
]

from rcli.app.csv_service import CsvService, OutputFormat
from rcli.app.text_service import GeneratedKeys, TextService, VerificationResult

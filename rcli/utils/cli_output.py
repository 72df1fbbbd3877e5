"""CLI JSON output wrapper.

Every ``--json`` payload carries the same envelope (schema_id,
schema_version, producer, produced_at) so scripted consumers can detect
format changes.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from rcli import __version__


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Create schema-wrapped JSON response for CLI output.

    Args:
        schema_id: Identifier for the output type (e.g., "text_verify").
        schema_version: Integer version for backward compatibility.
        **data: Payload data to include in the response.

    Returns:
        JSON string with schema metadata and payload.

    Example:
        >>> json_response("text_verify", 1, valid=True)
        {
          "schema_id": "text_verify",
          "schema_version": 1,
          "producer": "rcli-0.1.0",
          "produced_at": "2025-12-12T10:30:00+00:00",
          "valid": true
        }
    """
    wrapped = {
        "schema_id": schema_id,
        "schema_version": schema_version,
        "producer": f"rcli-{__version__}",
        "produced_at": datetime.now(UTC).isoformat(),
        **data,
    }
    return json.dumps(wrapped, indent=2, default=str)

"""CSV conversion service: tabular rows to JSON or YAML documents."""

from __future__ import annotations

import csv
import io
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from rcli.app.ports import StoragePort
from rcli.errors import ConfigurationError, ConversionError

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Serialization target for converted CSV records."""

    JSON = "json"
    YAML = "yaml"

    def __str__(self) -> str:
        return self.value


class CsvService:
    """Reads CSV through the storage port and writes structured output."""

    def __init__(self, *, storage_port: StoragePort) -> None:
        self.storage = storage_port

    def load_records(
        self,
        input_path: Path,
        *,
        delimiter: str = ",",
        header: bool = True,
    ) -> list[Any]:
        """Parse ``input_path`` into records.

        With ``header`` each row becomes a mapping of column name to value in
        header order; without it each row is a list of values. Every record must
        have as many fields as the first one.

        Raises:
            ConfigurationError: If ``delimiter`` is not a single character
            ConversionError: If the CSV cannot be parsed or a row is ragged
        """
        if len(delimiter) != 1:
            raise ConfigurationError(f"Delimiter must be a single character, got {delimiter!r}")

        text = self.storage.read_text(input_path)
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)

        records: list[Any] = []
        try:
            headers = next(reader, None) if header else None
            width = len(headers) if headers is not None else None
            for row in reader:
                if not row:
                    continue
                if width is None:
                    width = len(row)
                elif len(row) != width:
                    raise ConversionError(
                        f"Invalid CSV in {input_path} at line {reader.line_num}: "
                        f"found record with {len(row)} fields, expected {width}"
                    )
                if headers is None:
                    records.append(row)
                else:
                    records.append(dict(zip(headers, row)))
        except csv.Error as exc:
            raise ConversionError(
                f"Invalid CSV in {input_path} at line {reader.line_num}: {exc}"
            ) from exc

        logger.debug("Parsed %d records from %s", len(records), input_path)
        return records

    def render(self, records: list[Any], format: OutputFormat) -> str:
        """Serialize ``records`` as pretty JSON or block-style YAML."""
        if format is OutputFormat.YAML:
            return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
        return json.dumps(records, indent=2, ensure_ascii=False) + "\n"

    def convert(
        self,
        input_path: Path,
        output_path: Path,
        *,
        format: OutputFormat = OutputFormat.JSON,
        delimiter: str = ",",
        header: bool = True,
    ) -> int:
        """Convert ``input_path`` and write the result to ``output_path``.

        Returns:
            Number of records written

        Raises:
            SinkError: If the output file cannot be written
        """
        records = self.load_records(input_path, delimiter=delimiter, header=header)
        self.storage.write_text(output_path, self.render(records, format))
        logger.info("Wrote %d %s records to %s", len(records), format, output_path)
        return len(records)

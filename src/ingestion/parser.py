"""CSV parsing for uploaded files.

Turns raw CSV text into the trimmed header names and one dict per data row.
Quoting follows the usual convention: comma separated fields, double quotes
around fields that contain commas, quotes or newlines, and doubled quotes as
the escape inside a quoted field.
"""

import csv
from dataclasses import dataclass, field
from io import StringIO
from typing import List

from dataset_store.exceptions import EmptyFileError, ParseError
from dataset_store.types import RowData
from utils.logging import logger

BOM = "\ufeff"


@dataclass
class ParsedCSV:
    """Header names in file order and the parsed data rows."""

    headers: List[str]
    rows: List[RowData] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column_values(self, header: str) -> List[str]:
        """Get the raw values of one column across all rows, None where missing."""
        return [row.get(header) for row in self.rows]


def decode_csv_bytes(content: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a leading byte order mark.

    Raises:
        ParseError: If the content is not valid UTF-8
    """
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"CSV parsing error: file is not valid UTF-8 text ({e.reason} at byte {e.start})") from e


def parse_csv(text: str) -> ParsedCSV:
    """Parse CSV text using its first non-empty line as the header row.

    Empty lines are skipped. Header names are trimmed. Every data row must
    have exactly as many fields as the header.

    Args:
        text: Decoded CSV content

    Returns:
        ParsedCSV with headers and rows

    Raises:
        ParseError: If the CSV is malformed (unterminated quotes, rows with a different number of fields than the header)
        EmptyFileError: If there is no usable header row
    """
    if text.startswith(BOM):
        text = text[len(BOM) :]

    reader = csv.reader(StringIO(text, newline=""), strict=True)
    headers: List[str] = []
    rows: List[RowData] = []

    try:
        for fields in reader:
            # Blank lines come back as empty lists
            if not fields:
                continue

            if not headers:
                headers = [name.strip() for name in fields]
                if not any(headers):
                    raise EmptyFileError("CSV file appears to be empty or invalid")
                continue

            if len(fields) != len(headers):
                problem = "Too many fields" if len(fields) > len(headers) else "Too few fields"
                raise ParseError(
                    f"CSV parsing error: {problem}: expected {len(headers)} fields but parsed {len(fields)} (row {len(rows) + 1})"
                )

            rows.append(dict(zip(headers, fields)))
    except csv.Error as e:
        raise ParseError(f"CSV parsing error: {e}") from e

    if not headers:
        raise EmptyFileError("CSV file appears to be empty or invalid")

    logger.debug(f"Parsed CSV with {len(headers)} columns and {len(rows)} rows")
    return ParsedCSV(headers=headers, rows=rows)

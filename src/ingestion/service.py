"""Entry point turning an uploaded CSV file into a dataset."""

from typing import Optional

from dataset_store.models import DatasetCreate
from ingestion.assembly import assemble_dataset
from ingestion.parser import decode_csv_bytes, parse_csv
from utils.logging import logger


def ingest_csv(content: bytes, file_name: str, file_size: Optional[int] = None) -> DatasetCreate:
    """Decode, parse and type an uploaded CSV file.

    Either returns one complete dataset or raises; nothing partial is produced.

    Args:
        content: Raw uploaded bytes (UTF-8 text)
        file_name: Original file name
        file_size: Size in bytes, defaults to len(content)

    Returns:
        DatasetCreate for the store

    Raises:
        EmptyFileError: If the file has no usable header row
        ParseError: If the file is not valid UTF-8 or not well-formed CSV
        ValidationError: If the assembled dataset fails the shape check
    """
    size = len(content) if file_size is None else file_size
    logger.info(f"Ingesting '{file_name}' ({size} bytes)")

    text = decode_csv_bytes(content)
    parsed = parse_csv(text)
    dataset = assemble_dataset(parsed, file_name=file_name, file_size=size)

    logger.info(f"Ingested '{file_name}': {dataset.row_count} rows, {dataset.column_count} columns")
    return dataset

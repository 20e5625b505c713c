"""CSV ingestion: parsing, column type inference and dataset assembly."""

from ingestion.assembly import assemble_dataset, dataset_name_from_file_name
from ingestion.inference import (
    TYPE_RATIO_THRESHOLD,
    infer_column_type,
    is_date,
    is_missing,
    is_nullable,
    is_number,
    parse_date,
    parse_number,
)
from ingestion.parser import ParsedCSV, decode_csv_bytes, parse_csv
from ingestion.service import ingest_csv

__all__ = [
    "ingest_csv",
    "parse_csv",
    "decode_csv_bytes",
    "ParsedCSV",
    "infer_column_type",
    "is_missing",
    "is_nullable",
    "is_number",
    "is_date",
    "parse_number",
    "parse_date",
    "TYPE_RATIO_THRESHOLD",
    "assemble_dataset",
    "dataset_name_from_file_name",
]

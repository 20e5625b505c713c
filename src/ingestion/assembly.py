"""Dataset assembly and structural validation."""

from typing import Any, Dict, List

import pydantic

from dataset_store.exceptions import ValidationError
from dataset_store.models import DatasetCreate, DatasetShapeError
from ingestion.inference import infer_column_type, is_nullable
from ingestion.parser import ParsedCSV
from utils.logging import logger


def dataset_name_from_file_name(file_name: str) -> str:
    """Derive a display name by dropping the first ".csv" from the file name."""
    return file_name.replace(".csv", "", 1)


def _collect_violations(error: pydantic.ValidationError) -> List[Dict[str, str]]:
    """Flatten a pydantic error into one entry per violated field."""
    violations = []
    for detail in error.errors():
        cause = detail.get("ctx", {}).get("error")
        if isinstance(cause, DatasetShapeError):
            violations.extend(cause.violations)
            continue
        field = ".".join(str(part) for part in detail["loc"]) or "dataset"
        violations.append({"field": field, "message": detail["msg"]})
    return violations


def assemble_dataset(parsed: ParsedCSV, file_name: str, file_size: int) -> DatasetCreate:
    """Combine parsed rows and inferred column types into a validated dataset.

    Args:
        parsed: Output of the CSV parser
        file_name: Original uploaded file name
        file_size: Uploaded file size in bytes

    Returns:
        DatasetCreate ready to hand to a store

    Raises:
        ValidationError: If the assembled dataset does not have the expected shape
    """
    columns: List[Dict[str, Any]] = []
    for header in parsed.headers:
        values = parsed.column_values(header)
        column_type = infer_column_type(values)
        columns.append({"name": header, "type": column_type, "nullable": is_nullable(values)})
        logger.debug(f"Column '{header}': type={column_type.value}")

    candidate = {
        "name": dataset_name_from_file_name(file_name),
        "fileName": file_name,
        "fileSize": file_size,
        "rowCount": parsed.row_count,
        "columnCount": len(parsed.headers),
        "columns": columns,
        "data": parsed.rows,
    }

    try:
        return DatasetCreate.model_validate(candidate)
    except pydantic.ValidationError as e:
        violations = _collect_violations(e)
        logger.warning(f"Dataset '{file_name}' failed validation with {len(violations)} violation(s)")
        raise ValidationError("Invalid dataset data", errors=violations) from e

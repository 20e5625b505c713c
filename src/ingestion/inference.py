"""Column type inference for parsed CSV data."""

from datetime import datetime
from typing import Optional, Sequence

from dataset_store.types import ColumnType
from dataset_store.validators import get_validator

# Share of non-empty values that must parse for a column to take a type. Strict.
TYPE_RATIO_THRESHOLD = 0.8

# Tried in order; text accepts every cell so it always ends the search
INFERENCE_ORDER = (ColumnType.NUMBER, ColumnType.DATE, ColumnType.TEXT)


def is_missing(value: Optional[str]) -> bool:
    """Check whether a cell value counts as missing (None or blank)."""
    return value is None or value.strip() == ""


def is_number(value: Optional[str]) -> bool:
    return get_validator(ColumnType.NUMBER).is_valid(value)


def is_date(value: Optional[str]) -> bool:
    return get_validator(ColumnType.DATE).is_valid(value)


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a cell of a number column, None when it is not a number."""
    validator = get_validator(ColumnType.NUMBER)
    return validator.validate(value) if validator.is_valid(value) else None


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a cell of a date column, None when it is not a date."""
    validator = get_validator(ColumnType.DATE)
    return validator.validate(value) if validator.is_valid(value) else None


def infer_column_type(values: Sequence[Optional[str]]) -> ColumnType:
    """Infer the dominant type of a column from its raw values.

    Number is tried before date, so a column of plain years is a number column.

    Args:
        values: Raw cell values of one column, None for missing cells

    Returns:
        ColumnType.NUMBER or ColumnType.DATE when more than 80% of the
        non-empty values parse as such, ColumnType.TEXT otherwise
    """
    non_null = [value for value in values if not is_missing(value)]
    if not non_null:
        return ColumnType.TEXT

    for column_type in INFERENCE_ORDER:
        validator = get_validator(column_type)
        matches = sum(1 for value in non_null if validator.is_valid(value))
        if matches / len(non_null) > TYPE_RATIO_THRESHOLD:
            return column_type

    return ColumnType.TEXT


def is_nullable(values: Sequence[Optional[str]]) -> bool:
    """A column is nullable when any value is None or the empty string."""
    return any(value is None or value == "" for value in values)

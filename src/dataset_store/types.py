"""Type definitions for the dataset store module."""

from enum import Enum
from typing import Dict, Optional


class ColumnType(str, Enum):
    """Column types a CSV column can be inferred as."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"


# A parsed CSV row: column name -> raw cell value, None for missing cells
RowData = Dict[str, Optional[str]]

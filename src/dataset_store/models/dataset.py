"""Dataset models and related utilities."""

from datetime import datetime, timezone
from typing import Dict, List
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from dataset_store.models.base import MODEL_CONFIG, PydanticUUID
from dataset_store.models.column import DatasetColumn
from dataset_store.types import RowData


class DatasetShapeError(ValueError):
    """Raised from model validation when counts, columns and rows disagree."""

    def __init__(self, violations: List[Dict[str, str]]):
        super().__init__("; ".join(f"{v['field']}: {v['message']}" for v in violations))
        self.violations = violations


class DatasetCreate(BaseModel):
    """Dataset as assembled from an upload, before the store assigns an id."""

    name: str = Field(min_length=1, description="Display name derived from the file name")
    file_name: str = Field(alias="fileName", min_length=1, description="Original uploaded file name")
    file_size: int = Field(alias="fileSize", ge=0, description="Uploaded file size in bytes")
    row_count: int = Field(alias="rowCount", ge=0)
    column_count: int = Field(alias="columnCount", ge=1)
    columns: List[DatasetColumn] = Field(min_length=1, description="Columns in CSV header order")
    data: List[RowData] = Field(description="Parsed rows, column name to raw value")

    model_config = MODEL_CONFIG

    @model_validator(mode="after")
    def validate_shape(self) -> "DatasetCreate":
        """Validate counts match content and rows only use known columns."""
        violations = []
        if self.row_count != len(self.data):
            violations.append({"field": "rowCount", "message": f"expected {len(self.data)} to match the number of rows, got {self.row_count}"})
        if self.column_count != len(self.columns):
            violations.append({"field": "columnCount", "message": f"expected {len(self.columns)} to match the number of columns, got {self.column_count}"})

        names = [column.name for column in self.columns]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            violations.append({"field": "columns", "message": f"duplicate column names: {', '.join(duplicates)}"})

        known = set(names)
        for index, row in enumerate(self.data):
            unknown = set(row) - known
            if unknown:
                violations.append({"field": f"data.{index}", "message": f"unknown columns: {', '.join(sorted(unknown))}"})
                break

        if violations:
            raise DatasetShapeError(violations)
        return self

    def get_column(self, name: str) -> DatasetColumn:
        """Get a column by name.

        Raises:
            KeyError: If the column does not exist
        """
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Column '{name}' not found in dataset")

    def get_column_names(self) -> List[str]:
        return [column.name for column in self.columns]


class DatasetRecord(DatasetCreate):
    """Stored dataset. Immutable once created."""

    id: PydanticUUID = Field(default_factory=uuid4)
    uploaded_at: datetime = Field(alias="uploadedAt", default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_create(cls, dataset: DatasetCreate) -> "DatasetRecord":
        """Build a new record with a fresh id and upload timestamp."""
        return cls.model_validate(dataset.model_dump(by_alias=True))


class DatasetSummary(BaseModel):
    """Dataset metadata without its rows."""

    id: PydanticUUID
    name: str
    file_name: str = Field(alias="fileName")
    file_size: int = Field(alias="fileSize")
    row_count: int = Field(alias="rowCount")
    column_count: int = Field(alias="columnCount")
    columns: List[DatasetColumn]
    uploaded_at: datetime = Field(alias="uploadedAt")

    model_config = MODEL_CONFIG

    @classmethod
    def from_record(cls, record: DatasetRecord) -> "DatasetSummary":
        return cls.model_validate(record.model_dump(by_alias=True, exclude={"data"}))


class StoreStats(BaseModel):
    """Totals across all stored datasets."""

    dataset_count: int = Field(alias="datasetCount", default=0)
    total_rows: int = Field(alias="totalRows", default=0)
    total_columns: int = Field(alias="totalColumns", default=0)
    total_size: int = Field(alias="totalSize", default=0)

    model_config = MODEL_CONFIG

    @classmethod
    def from_records(cls, records: List[DatasetRecord]) -> "StoreStats":
        return cls(
            dataset_count=len(records),
            total_rows=sum(record.row_count for record in records),
            total_columns=sum(record.column_count for record in records),
            total_size=sum(record.file_size for record in records),
        )

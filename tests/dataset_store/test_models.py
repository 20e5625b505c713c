"""Tests for the dataset store models."""

from datetime import datetime, timezone
from uuid import UUID

import pytest
from pydantic import ValidationError as PydanticValidationError

from dataset_store.models import DatasetColumn, DatasetCreate, DatasetRecord, DatasetSummary, StoreStats
from dataset_store.types import ColumnType


@pytest.fixture
def sample_create() -> DatasetCreate:
    """Sample dataset as produced by ingestion."""
    return DatasetCreate(
        name="people",
        file_name="people.csv",
        file_size=42,
        row_count=2,
        column_count=2,
        columns=[
            DatasetColumn(name="name", type=ColumnType.TEXT),
            DatasetColumn(name="age", type=ColumnType.NUMBER, nullable=True),
        ],
        data=[{"name": "Ann", "age": "31"}, {"name": "Ben", "age": None}],
    )


def test_dataset_creation(sample_create: DatasetCreate):
    """Test creating a dataset with valid data."""
    assert sample_create.row_count == 2
    assert sample_create.get_column("age").nullable is True


def test_dataset_accepts_aliases():
    """Camel case keys from the wire format should populate the model."""
    dataset = DatasetCreate.model_validate(
        {
            "name": "t",
            "fileName": "t.csv",
            "fileSize": 1,
            "rowCount": 0,
            "columnCount": 1,
            "columns": [{"name": "a", "type": "text", "nullable": False}],
            "data": [],
        }
    )
    assert dataset.file_name == "t.csv"
    assert dataset.columns[0].type == ColumnType.TEXT


def test_dataset_row_count_mismatch(sample_create: DatasetCreate):
    """Row count must match the number of rows."""
    payload = sample_create.model_dump()
    payload["row_count"] = 5
    with pytest.raises(PydanticValidationError) as exc:
        DatasetCreate(**payload)
    assert "rowCount" in str(exc.value)


def test_dataset_column_count_mismatch(sample_create: DatasetCreate):
    """Column count must match the number of columns."""
    payload = sample_create.model_dump()
    payload["column_count"] = 3
    with pytest.raises(PydanticValidationError) as exc:
        DatasetCreate(**payload)
    assert "columnCount" in str(exc.value)


def test_dataset_unknown_row_keys(sample_create: DatasetCreate):
    """Rows may only use column names as keys."""
    payload = sample_create.model_dump()
    payload["data"][1]["email"] = "ben@example.com"
    with pytest.raises(PydanticValidationError) as exc:
        DatasetCreate(**payload)
    assert "unknown columns: email" in str(exc.value)


def test_dataset_rows_may_omit_columns(sample_create: DatasetCreate):
    """Row keys are a subset of the columns, absent cells are allowed."""
    payload = sample_create.model_dump()
    payload["data"][1] = {"name": "Ben"}
    dataset = DatasetCreate(**payload)
    assert dataset.data[1] == {"name": "Ben"}


def test_column_invalid_type():
    """Only text, number and date are column types."""
    with pytest.raises(PydanticValidationError):
        DatasetColumn(name="flag", type="bool")


def test_column_blank_name():
    """Column names must not be blank."""
    with pytest.raises(PydanticValidationError):
        DatasetColumn(name="   ", type=ColumnType.TEXT)


def test_record_from_create(sample_create: DatasetCreate):
    """A record gets an id and an upload time, the rest is copied."""
    record = DatasetRecord.from_create(sample_create)

    assert isinstance(record.id, UUID)
    assert record.uploaded_at.tzinfo == timezone.utc
    assert record.data == sample_create.data
    assert record.columns == sample_create.columns


def test_record_ids_are_distinct(sample_create: DatasetCreate):
    first = DatasetRecord.from_create(sample_create)
    second = DatasetRecord.from_create(sample_create)
    assert first.id != second.id


def test_record_is_immutable(sample_create: DatasetCreate):
    """Stored records cannot be edited in place."""
    record = DatasetRecord.from_create(sample_create)
    with pytest.raises(PydanticValidationError):
        record.name = "renamed"


def test_record_serializes_with_wire_names(sample_create: DatasetCreate):
    """JSON output should use the camel case field names."""
    record = DatasetRecord.from_create(sample_create)
    payload = record.model_dump(mode="json", by_alias=True)

    assert payload["id"] == str(record.id)
    assert set(payload) == {"id", "name", "fileName", "fileSize", "rowCount", "columnCount", "columns", "data", "uploadedAt"}
    assert payload["columns"][1] == {"name": "age", "type": "number", "nullable": True}


def test_summary_drops_rows(sample_create: DatasetCreate):
    record = DatasetRecord.from_create(sample_create)
    summary = DatasetSummary.from_record(record)

    assert summary.id == record.id
    assert summary.row_count == 2
    assert "data" not in summary.model_dump(by_alias=True)


def test_store_stats_from_records(sample_create: DatasetCreate):
    records = [DatasetRecord.from_create(sample_create), DatasetRecord.from_create(sample_create)]
    stats = StoreStats.from_records(records)

    assert stats.dataset_count == 2
    assert stats.total_rows == 4
    assert stats.total_columns == 4
    assert stats.total_size == 84
    assert stats.model_dump(by_alias=True) == {"datasetCount": 2, "totalRows": 4, "totalColumns": 4, "totalSize": 84}


def test_store_stats_empty():
    assert StoreStats.from_records([]) == StoreStats()


def test_record_uploaded_at_from_string():
    """Upload time round trips through its ISO form."""
    record = DatasetRecord.model_validate(
        {
            "id": "6f1c1b1e-8d7a-4c8e-9a55-0c2c6bde0f11",
            "name": "t",
            "fileName": "t.csv",
            "fileSize": 1,
            "rowCount": 0,
            "columnCount": 1,
            "columns": [{"name": "a", "type": "date"}],
            "data": [],
            "uploadedAt": "2024-05-01T12:00:00+00:00",
        }
    )
    assert record.uploaded_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)
    assert str(record.id) == "6f1c1b1e-8d7a-4c8e-9a55-0c2c6bde0f11"

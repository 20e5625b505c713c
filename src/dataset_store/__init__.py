"""Dataset store package."""

from dataset_store.exceptions import (
    DatabaseError,
    DatasetNotFoundError,
    DatasetStoreError,
    EmptyFileError,
    IngestionError,
    ParseError,
    ValidationError,
)
from dataset_store.models import DatasetColumn, DatasetCreate, DatasetRecord, DatasetSummary, StoreStats
from dataset_store.stores import DatasetStore, InMemoryDatasetStore, MongoDatasetStore, create_store
from dataset_store.types import ColumnType

__all__ = [
    # Stores
    "DatasetStore",
    "InMemoryDatasetStore",
    "MongoDatasetStore",
    "create_store",
    # Models
    "ColumnType",
    "DatasetColumn",
    "DatasetCreate",
    "DatasetRecord",
    "DatasetSummary",
    "StoreStats",
    # Exceptions
    "DatasetStoreError",
    "IngestionError",
    "EmptyFileError",
    "ParseError",
    "ValidationError",
    "DatasetNotFoundError",
    "DatabaseError",
]

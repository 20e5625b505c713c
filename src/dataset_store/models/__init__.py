"""Models package for dataset store."""

from dataset_store.models.column import DatasetColumn
from dataset_store.models.dataset import (
    DatasetCreate,
    DatasetRecord,
    DatasetShapeError,
    DatasetSummary,
    StoreStats,
)

__all__ = [
    "DatasetColumn",
    "DatasetCreate",
    "DatasetRecord",
    "DatasetShapeError",
    "DatasetSummary",
    "StoreStats",
]

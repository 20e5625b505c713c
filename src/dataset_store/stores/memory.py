"""In-memory dataset store."""

from typing import Dict, List
from uuid import UUID

from dataset_store.exceptions import DatasetNotFoundError
from dataset_store.models import DatasetCreate, DatasetRecord
from dataset_store.stores.base import DatasetStore
from utils.logging import logger


class InMemoryDatasetStore(DatasetStore):
    """Dataset store backed by a dict. Each instance holds its own datasets.

    Records go out as deep copies so callers cannot edit stored rows.
    """

    def __init__(self) -> None:
        self._datasets: Dict[UUID, DatasetRecord] = {}

    def __len__(self) -> int:
        return len(self._datasets)

    async def get_dataset(self, dataset_id: UUID) -> DatasetRecord:
        logger.debug(f"Getting dataset {dataset_id}")
        dataset = self._datasets.get(dataset_id)
        if dataset is None:
            raise DatasetNotFoundError(f"Dataset {dataset_id} not found")
        return dataset.model_copy(deep=True)

    async def list_datasets(self) -> List[DatasetRecord]:
        # Later inserts win ties on upload time
        datasets = sorted(reversed(self._datasets.values()), key=lambda dataset: dataset.uploaded_at, reverse=True)
        return [dataset.model_copy(deep=True) for dataset in datasets]

    async def create_dataset(self, dataset: DatasetCreate) -> DatasetRecord:
        record = DatasetRecord.from_create(dataset)
        self._datasets[record.id] = record
        logger.info(f"Dataset '{record.name}' created with ID: {record.id}")
        return record.model_copy(deep=True)

    async def delete_dataset(self, dataset_id: UUID) -> None:
        if self._datasets.pop(dataset_id, None) is None:
            raise DatasetNotFoundError(f"Dataset {dataset_id} not found")
        logger.info(f"Dataset {dataset_id} deleted")

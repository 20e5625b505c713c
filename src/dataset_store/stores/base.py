"""Base class for dataset stores."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from dataset_store.models import DatasetCreate, DatasetRecord, StoreStats


class DatasetStore(ABC):
    """Storage for dataset records keyed by id.

    Records are immutable; a store only creates, reads and deletes them.
    """

    @abstractmethod
    async def get_dataset(self, dataset_id: UUID) -> DatasetRecord:
        """Retrieve a dataset.

        Raises:
            DatasetNotFoundError: If no dataset has this id
        """
        pass

    @abstractmethod
    async def list_datasets(self) -> List[DatasetRecord]:
        """List all datasets, most recently uploaded first."""
        pass

    @abstractmethod
    async def create_dataset(self, dataset: DatasetCreate) -> DatasetRecord:
        """Store a dataset under a new id and return the stored record."""
        pass

    @abstractmethod
    async def delete_dataset(self, dataset_id: UUID) -> None:
        """Delete a dataset.

        Raises:
            DatasetNotFoundError: If no dataset has this id
        """
        pass

    async def get_stats(self) -> StoreStats:
        """Totals across all stored datasets."""
        return StoreStats.from_records(await self.list_datasets())

    async def close(self) -> None:
        """Release backend resources."""
        pass

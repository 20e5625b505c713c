"""MongoDB dataset store."""

from typing import Any, Dict, List
from uuid import UUID

import pymongo
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from dataset_store.exceptions import DatabaseError, DatasetNotFoundError
from dataset_store.models import DatasetCreate, DatasetRecord
from dataset_store.stores.base import DatasetStore
from utils.logging import logger


class MongoDatasetStore(DatasetStore):
    """Dataset store backed by a MongoDB collection."""

    COLLECTION_DATASETS: str = "datasets"

    def __init__(self, mongodb_client: AsyncIOMotorClient, database_name: str) -> None:
        """Initialize store with MongoDB client.
        Note: Use MongoDatasetStore.setup() to create a properly initialized instance."""
        self.client = mongodb_client
        self._db: AsyncIOMotorDatabase = self.client.get_database(database_name)
        self._datasets: AsyncIOMotorCollection = self._db.get_collection(self.COLLECTION_DATASETS)

    @classmethod
    async def setup(cls, mongodb_client: AsyncIOMotorClient, database_name: str) -> "MongoDatasetStore":
        """Factory method to create and setup a MongoDatasetStore instance."""
        try:
            store = cls(mongodb_client, database_name)
            await store._datasets.create_indexes(
                [
                    # Index for newest-first listing
                    pymongo.IndexModel([("uploadedAt", pymongo.DESCENDING)], background=True),
                ]
            )
            return store
        except Exception as e:
            raise DatabaseError(f"Failed to setup indexes: {str(e)}")

    @staticmethod
    def _to_document(record: DatasetRecord) -> Dict[str, Any]:
        document = record.model_dump(by_alias=True)
        document["_id"] = document.pop("id")
        return document

    @staticmethod
    def _from_document(document: Dict[str, Any]) -> DatasetRecord:
        document = dict(document)
        document["id"] = document.pop("_id")
        return DatasetRecord.model_validate(document)

    async def get_dataset(self, dataset_id: UUID) -> DatasetRecord:
        try:
            logger.debug(f"Getting dataset {dataset_id}")
            doc = await self._datasets.find_one({"_id": str(dataset_id)})
            if not doc:
                raise DatasetNotFoundError(f"Dataset {dataset_id} not found")
            return self._from_document(doc)
        except DatasetNotFoundError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to get dataset: {str(e)}")

    async def list_datasets(self) -> List[DatasetRecord]:
        try:
            logger.info("Listing datasets")
            datasets = []
            cursor = self._datasets.find({}, sort=[("uploadedAt", pymongo.DESCENDING)])
            async for doc in cursor:
                datasets.append(self._from_document(doc))
            return datasets
        except Exception as e:
            raise DatabaseError(f"Failed to list datasets: {str(e)}")

    async def create_dataset(self, dataset: DatasetCreate) -> DatasetRecord:
        try:
            record = DatasetRecord.from_create(dataset)
            logger.info(f"Creating dataset '{record.name}'")
            result = await self._datasets.insert_one(self._to_document(record))
            logger.info(f"Dataset created with ID: {result.inserted_id}")
            return record
        except Exception as e:
            raise DatabaseError(f"Failed to create dataset: {str(e)}")

    async def delete_dataset(self, dataset_id: UUID) -> None:
        try:
            logger.info(f"Deleting dataset {dataset_id}")
            result = await self._datasets.delete_one({"_id": str(dataset_id)})
            if result.deleted_count == 0:
                raise DatasetNotFoundError(f"Dataset {dataset_id} not found")
            logger.info("Dataset deleted successfully")
        except DatasetNotFoundError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to delete dataset: {str(e)}")

    async def close(self) -> None:
        self.client.close()

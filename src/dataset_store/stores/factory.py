"""Factory for creating the configured dataset store."""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from dataset_store.stores.base import DatasetStore
from dataset_store.stores.memory import InMemoryDatasetStore
from dataset_store.stores.mongo import MongoDatasetStore

MEMORY_BACKEND = "memory"
MONGODB_BACKEND = "mongodb"


async def create_store(backend: str, database_url: Optional[str] = None, database_name: Optional[str] = None) -> DatasetStore:
    """Create a dataset store for a backend name.

    Args:
        backend: "memory" or "mongodb"
        database_url: MongoDB connection string, required for "mongodb"
        database_name: MongoDB database name, required for "mongodb"

    Raises:
        ValueError: If the backend is unknown or its settings are missing
    """
    backend = backend.lower()
    if backend == MEMORY_BACKEND:
        return InMemoryDatasetStore()
    if backend == MONGODB_BACKEND:
        if not database_url or not database_name:
            raise ValueError("MongoDB store needs a database url and a database name")
        return await MongoDatasetStore.setup(AsyncIOMotorClient(database_url, tz_aware=True), database_name)
    raise ValueError(f"Unknown dataset store backend: {backend}")

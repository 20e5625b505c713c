"""Dataset store backends."""

from dataset_store.stores.base import DatasetStore
from dataset_store.stores.factory import MEMORY_BACKEND, MONGODB_BACKEND, create_store
from dataset_store.stores.memory import InMemoryDatasetStore
from dataset_store.stores.mongo import MongoDatasetStore

__all__ = [
    "DatasetStore",
    "InMemoryDatasetStore",
    "MongoDatasetStore",
    "create_store",
    "MEMORY_BACKEND",
    "MONGODB_BACKEND",
]

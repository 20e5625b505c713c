"""API dependencies."""

from fastapi import Request

from dataset_store.stores import DatasetStore


async def get_store(request: Request) -> DatasetStore:
    """Dependency for getting the application's dataset store."""
    return request.app.state.store

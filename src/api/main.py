"""Main FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import datasets
from dataset_store.stores import DatasetStore, create_store
from settings import settings
from utils.logging import logger


def create_app(store: Optional[DatasetStore] = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        store: Dataset store to serve. When omitted, the store configured in
            settings is created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = store is None
        if owns_store:
            app.state.store = await create_store(settings.store_backend, settings.database_url, settings.database_name)
            logger.info(f"Using '{settings.store_backend}' dataset store")
        yield

        if owns_store:
            await app.state.store.close()

    app = FastAPI(title=settings.api_title, version=settings.api_version, description=settings.api_description, lifespan=lifespan)
    if store is not None:
        app.state.store = store

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add routers
    app.include_router(datasets.router)

    @app.get("/")
    async def root():
        return {"message": "CSV Dataset API running", "docs": "/docs"}

    return app


app = create_app()

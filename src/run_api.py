"""Run the FastAPI server."""

import uvicorn

from settings import settings

if __name__ == "__main__":
    # Single worker: the in-memory store lives in the serving process
    workers = 1 if settings.store_backend == "memory" else 2

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        workers=workers,
    )

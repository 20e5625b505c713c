"""App settings."""

from typing import List

from pydantic_settings import BaseSettings

from constants import (
    CORS_ALLOWED_ORIGINS,
    DATABASE_CONNECTION_STRING,
    DATABASE_NAME,
    DATASET_STORE_BACKEND,
    MAX_UPLOAD_SIZE,
)


class Settings(BaseSettings):
    """API settings configuration."""

    # API settings
    api_title: str = "CSV Dataset API"
    api_version: str = "1.0.0"
    api_description: str = "Upload CSV files, infer their column types and serve the typed datasets"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Dataset store settings
    store_backend: str = DATASET_STORE_BACKEND
    database_url: str = DATABASE_CONNECTION_STRING
    database_name: str = DATABASE_NAME

    # Upload settings
    max_upload_size: int = MAX_UPLOAD_SIZE

    # CORS
    cors_allowed_origins: str = CORS_ALLOWED_ORIGINS

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()

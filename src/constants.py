"""Constants for the application."""

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Logging
LOGGING_LEVEL = getattr(logging, os.environ.get("LOGGING_LEVEL", "INFO").upper(), logging.INFO)

# Dataset store settings
DATASET_STORE_BACKEND = os.environ.get("DATASET_STORE_BACKEND", "memory")
DATABASE_CONNECTION_STRING = os.environ.get("DATABASE_CONNECTION_STRING", "mongodb://localhost:27017")
DATABASE_NAME = os.environ.get("DATABASE_NAME", "csv_datasets")

# Upload settings
MAX_UPLOAD_SIZE = int(os.environ.get("MAX_UPLOAD_SIZE", 10 * 1024 * 1024))
CSV_CONTENT_TYPES = ("text/csv",)
CSV_FILE_SUFFIX = ".csv"

# API settings
CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "*")

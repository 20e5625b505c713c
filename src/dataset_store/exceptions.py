"""Exceptions for the dataset store and CSV ingestion."""

from typing import Dict, List, Optional


class DatasetStoreError(Exception):
    """Base exception for dataset store errors."""

    pass


class IngestionError(DatasetStoreError):
    """Base exception for errors raised while turning an upload into a dataset."""

    pass


class EmptyFileError(IngestionError):
    """Raised when a CSV file has no usable header row."""

    pass


class ParseError(IngestionError):
    """Raised when CSV content is malformed or cannot be decoded."""

    pass


class ValidationError(IngestionError):
    """Raised when an assembled dataset fails the structural shape check.

    Carries one entry per violated field in ``errors``.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors: List[Dict[str, str]] = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        details = "; ".join(f"{error['field']}: {error['message']}" for error in self.errors)
        return f"{super().__str__()}: {details}"


class DatasetNotFoundError(DatasetStoreError):
    """Raised when a dataset is not found."""

    pass


class DatabaseError(DatasetStoreError):
    """Raised when the storage backend fails."""

    pass

"""Dataset router for uploading and retrieving CSV datasets."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_store
from api.models import InvalidDatasetResponse, MessageResponse
from constants import CSV_CONTENT_TYPES, CSV_FILE_SUFFIX
from dataset_store.exceptions import DatasetNotFoundError, EmptyFileError, ParseError, ValidationError
from dataset_store.models import DatasetRecord, DatasetSummary, StoreStats
from dataset_store.stores import DatasetStore
from ingestion import ingest_csv
from settings import settings
from utils.logging import logger

router = APIRouter(prefix="/api/datasets", tags=["datasets"])


def _parse_dataset_id(dataset_id: str) -> UUID:
    try:
        return UUID(dataset_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dataset not found")


def _is_csv_upload(file: UploadFile) -> bool:
    return file.content_type in CSV_CONTENT_TYPES or (file.filename or "").endswith(CSV_FILE_SUFFIX)


@router.get("", response_model=List[DatasetSummary])
async def list_datasets(store: DatasetStore = Depends(get_store)) -> List[DatasetSummary]:
    """List all datasets without their rows, newest first."""
    try:
        datasets = await store.list_datasets()
        return [DatasetSummary.from_record(dataset) for dataset in datasets]
    except Exception as e:
        logger.error(f"Failed to list datasets: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch datasets")


@router.get("/stats", response_model=StoreStats)
async def get_stats(store: DatasetStore = Depends(get_store)) -> StoreStats:
    """Totals across all datasets."""
    try:
        return await store.get_stats()
    except Exception as e:
        logger.error(f"Failed to compute dataset stats: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch dataset stats")


@router.get("/{dataset_id}", response_model=DatasetRecord)
async def get_dataset(dataset_id: str, store: DatasetStore = Depends(get_store)) -> DatasetRecord:
    """Get a dataset with all of its rows."""
    try:
        return await store.get_dataset(_parse_dataset_id(dataset_id))
    except DatasetNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dataset not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error getting dataset {dataset_id}: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch dataset")


@router.post(
    "/upload",
    response_model=DatasetRecord,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": InvalidDatasetResponse}},
)
async def upload_dataset(file: Optional[UploadFile] = File(None), store: DatasetStore = Depends(get_store)) -> DatasetRecord:
    """Upload a CSV file, infer its column types and store it as a dataset."""
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    if not _is_csv_upload(file):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only CSV files are allowed")

    too_large = HTTPException(status_code=413, detail=f"File too large. Maximum size is {settings.max_upload_size} bytes")
    if file.size is not None and file.size > settings.max_upload_size:
        raise too_large
    # Never buffer more than one byte past the limit
    content = await file.read(settings.max_upload_size + 1)
    if len(content) > settings.max_upload_size:
        raise too_large

    file_name = file.filename or "upload.csv"
    try:
        dataset = await run_in_threadpool(ingest_csv, content, file_name, len(content))
        return await store.create_dataset(dataset)
    except ValidationError as e:
        logger.error(f"Invalid dataset from '{file_name}': {str(e)}")
        detail = InvalidDatasetResponse(errors=e.errors)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail.model_dump())
    except (EmptyFileError, ParseError) as e:
        logger.error(f"Failed to ingest '{file_name}': {str(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error processing '{file_name}': {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to process CSV file")


@router.delete("/{dataset_id}", response_model=MessageResponse)
async def delete_dataset(dataset_id: str, store: DatasetStore = Depends(get_store)) -> MessageResponse:
    """Delete a dataset."""
    try:
        await store.delete_dataset(_parse_dataset_id(dataset_id))
        return MessageResponse(message="Dataset deleted successfully")
    except DatasetNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dataset not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error deleting dataset {dataset_id}: {str(e)}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete dataset")

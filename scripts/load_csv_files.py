#!/usr/bin/env python
"""
Bulk loading script for CSV files.

Ingests every CSV file given on the command line and stores the resulting
datasets in the configured MongoDB database, the same way an upload through
the API would.

Usage:
    PYTHONPATH=src python scripts/load_csv_files.py data/people.csv data/sales.csv
"""

import asyncio
import sys
from pathlib import Path
from typing import List

from motor.motor_asyncio import AsyncIOMotorClient

from constants import DATABASE_CONNECTION_STRING, DATABASE_NAME
from dataset_store.exceptions import IngestionError
from dataset_store.stores import MongoDatasetStore
from ingestion import ingest_csv


async def load_csv_files(store: MongoDatasetStore, paths: List[Path]) -> int:
    """Ingest and store each file, skipping files that fail ingestion.

    Returns:
        Number of datasets stored
    """
    loaded = 0
    for path in paths:
        content = path.read_bytes()
        try:
            dataset = ingest_csv(content, path.name, len(content))
        except IngestionError as e:
            print(f"Skipping {path}: {e}")
            continue

        record = await store.create_dataset(dataset)
        print(f"Loaded {path} as '{record.name}' ({record.row_count} rows, {record.column_count} columns) with ID: {record.id}")
        loaded += 1
    return loaded


async def main():
    """Main function to load the CSV files named on the command line."""
    paths = [Path(arg) for arg in sys.argv[1:]]
    if not paths:
        print("Usage: load_csv_files.py FILE.csv [FILE.csv ...]")
        sys.exit(1)

    client = AsyncIOMotorClient(DATABASE_CONNECTION_STRING, tz_aware=True)

    try:
        print("Setting up dataset store...")
        store = await MongoDatasetStore.setup(client, DATABASE_NAME)

        loaded = await load_csv_files(store, paths)
        print(f"\nLoaded {loaded} of {len(paths)} files into '{DATABASE_NAME}'")

    finally:
        # Close the client connection
        client.close()


if __name__ == "__main__":
    asyncio.run(main())

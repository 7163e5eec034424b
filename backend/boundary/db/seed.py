"""
Record store seeding script.

Loads a JSON file shaped like ``{"events": [{...}, ...], "users": [...]}``
and appends every document to its collection.

Dependencies: backend.boundary.db
System role: Development data loading

Usage:
    python -m backend.boundary.db.seed seed.json [--replace]
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.db.CRUD.record_crud import record_crud
from backend.core.exceptions import ValidationError
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def load_seed_file(path: Path) -> dict[str, list[dict[str, Any]]]:
    """
    Read and validate a seed file.

    Args:
        path: JSON file mapping collection names to lists of objects

    Returns:
        dict: Collection name to documents

    Raises:
        ValidationError: If the file is not shaped as expected
    """
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValidationError("Seed file must contain a JSON object", field="root")
    for collection, documents in payload.items():
        if not isinstance(documents, list) or not all(isinstance(d, dict) for d in documents):
            raise ValidationError(
                "Each collection must map to a list of objects",
                field=collection,
            )
    return payload


async def seed_records(
    client: RecordStoreClient,
    payload: dict[str, list[dict[str, Any]]],
    replace: bool = False,
) -> dict[str, int]:
    """
    Write seed documents in a single transaction.

    Args:
        client: Initialized record store client
        payload: Collection name to documents
        replace: Delete each collection's existing records first

    Returns:
        dict: Collection name to number of inserted records
    """
    counts: dict[str, int] = {}
    async with client.session() as session:
        async with session.begin():
            for collection, documents in payload.items():
                if replace:
                    await record_crud.delete_collection(session, collection)
                created = await record_crud.add_many(session, collection, documents)
                counts[collection] = len(created)
    logger.info("Seeded record store", extra={"counts": counts})
    return counts


async def _main(path: Path, replace: bool) -> None:
    client = RecordStoreClient.from_settings()
    await client.initialize()
    try:
        await client.create_tables()
        counts = await seed_records(client, load_seed_file(path), replace=replace)
        for collection, count in counts.items():
            logger.info(f"{collection}: {count} records")
    finally:
        await client.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the alumni record store")
    parser.add_argument("path", type=Path, help="JSON seed file")
    parser.add_argument("--replace", action="store_true", help="Replace existing collections")
    args = parser.parse_args()

    configure_logging()
    asyncio.run(_main(args.path, args.replace))

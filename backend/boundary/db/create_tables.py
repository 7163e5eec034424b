"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, backend.boundary.db.connection
System role: Record store schema initialization

Usage:
    python -m backend.boundary.db.create_tables
"""

import asyncio
import logging

from backend.boundary.db.connection import RecordStoreClient
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables(client: RecordStoreClient | None = None) -> None:
    """
    Create all record store tables.

    Idempotent: CREATE TABLE IF NOT EXISTS semantics, so safe to run
    multiple times.

    Args:
        client: Record store client (built from settings when omitted)

    Raises:
        RecordStoreError: If the store cannot be reached
    """
    owns_client = client is None
    client = client or RecordStoreClient.from_settings()
    await client.initialize()
    try:
        await client.create_tables()
        logger.info("Record store tables created successfully")
    finally:
        if owns_client:
            await client.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())

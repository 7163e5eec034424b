"""
Record store gateway.

Fetches every document of a named collection. Store failures are caught,
logged and turned into an empty result so one unavailable collection
never fails a chat request.

Dependencies: backend.boundary.db, backend.observability
System role: Failure-isolating read path into the record store
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.db.CRUD.record_crud import record_crud
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

Record = dict[str, Any]


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of one collection read.

    ``records`` is empty both for an empty collection and for a failed
    read; ``error`` tells the two apart.
    """

    collection: str
    records: list[Record] = field(default_factory=list)
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class RecordStoreGateway:
    """Reads whole collections from the record store, never raising."""

    def __init__(self, store: RecordStoreClient) -> None:
        """
        Args:
            store: Initialized record store client
        """
        self.store = store

    async def fetch(self, collection: str) -> FetchResult:
        """
        Fetch all records of a collection.

        Each record is the stored field map with the store identifier
        merged in as ``id``.

        Args:
            collection: Collection name

        Returns:
            FetchResult: Records in insertion order, or empty with ``error`` set
        """
        try:
            async with self.store.session() as session:
                rows = await record_crud.get_by_collection(session, collection)
                records = [row.to_record() for row in rows]
        except Exception as e:
            log_exception_with_context(
                logger,
                f"Error fetching {collection}",
                e,
                collection=collection,
            )
            return FetchResult(collection=collection, error=f"{type(e).__name__}: {e}")

        logger.debug(f"{__name__}:fetch - collection={collection} count={len(records)}")
        return FetchResult(collection=collection, records=records)

    async def fetch_collection(self, collection: str) -> list[Record]:
        """Fetch a collection's records, empty on any failure."""
        return (await self.fetch(collection)).records

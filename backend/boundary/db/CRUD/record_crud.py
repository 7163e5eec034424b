"""
Record CRUD operations.

Collection-scoped reads and writes for RecordModel.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Record store persistence operations
"""

from typing import Any, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.record_model import RecordModel


class RecordCRUD(BaseCRUD[RecordModel]):
    """
    CRUD operations for RecordModel.

    Extends BaseCRUD with queries keyed by collection name.
    """

    def __init__(self) -> None:
        """Initialize RecordCRUD with RecordModel."""
        super().__init__(RecordModel)

    async def get_by_collection(
        self,
        session: AsyncSession,
        collection: str,
    ) -> Sequence[RecordModel]:
        """
        Retrieve every record in a collection, oldest first.

        Ordered by insertion sequence; timestamps only break ties between
        rows that carry no sequence.

        Args:
            session: Async database session
            collection: Collection name

        Returns:
            Sequence of RecordModels in insertion order
        """
        stmt = (
            select(RecordModel)
            .where(RecordModel.collection == collection)
            .order_by(RecordModel.position, RecordModel.created_at, RecordModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def add_many(
        self,
        session: AsyncSession,
        collection: str,
        documents: list[dict[str, Any]],
    ) -> list[RecordModel]:
        """
        Insert several documents into one collection.

        Each document gets the next insertion sequence after the
        collection's current maximum, so read order survives equal
        timestamps.

        Args:
            session: Async database session
            collection: Collection name
            documents: Field maps to store

        Returns:
            Created RecordModels in input order
        """
        result = await session.execute(
            select(func.coalesce(func.max(RecordModel.position), 0)).where(
                RecordModel.collection == collection
            )
        )
        next_position = result.scalar_one() + 1

        created = []
        for offset, document in enumerate(documents):
            created.append(
                await self.create(
                    session,
                    collection=collection,
                    data=dict(document),
                    position=next_position + offset,
                )
            )
        return created

    async def delete_collection(self, session: AsyncSession, collection: str) -> int:
        """
        Delete every record in a collection.

        Args:
            session: Async database session
            collection: Collection name

        Returns:
            Number of deleted rows
        """
        stmt = delete(RecordModel).where(RecordModel.collection == collection)
        result = await session.execute(stmt)
        return result.rowcount


record_crud = RecordCRUD()

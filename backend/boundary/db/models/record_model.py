"""
Record ORM model.

Stores one alumni-network document (event, campaign, internship,
notification, mentorship offer or user profile) as a JSON field map,
grouped by collection name.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Document persistence for the record store
"""

from typing import Any

from sqlalchemy import JSON, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class RecordModel(Base, UUIDMixin, TimestampMixin):
    """
    Record ORM model for collection-scoped documents.

    Rows carry no schema beyond their collection; the field map is whatever
    the frontend wrote. Rows are read back in insertion order.

    Attributes:
        id: UUID primary key, exposed to callers as the record ``id``
        collection: Collection name (e.g. "events", "users")
        data: JSON field map of the document
        position: Per-collection insertion sequence (0 when written outside add_many)
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "records"
    __table_args__ = (
        Index("ix_records_collection_position", "collection", "position"),
    )

    collection: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        doc="Collection name the document belongs to",
    )

    data: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Document field map",
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Insertion sequence within the collection",
    )

    def to_record(self) -> dict[str, Any]:
        """Return the field map with the store identifier merged in as ``id``."""
        return {**(self.data or {}), "id": str(self.id)}

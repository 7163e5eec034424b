"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - RecordStoreClient: Process-wide async engine/session handle
  - RecordModel: Collection-scoped document rows
  - BaseCRUD, RecordCRUD, record_crud: CRUD operations

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing the alumni record store
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.db.models.record_model import RecordModel
from backend.boundary.db.CRUD import BaseCRUD, RecordCRUD, record_crud

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "RecordStoreClient",
    # Models
    "RecordModel",
    # CRUD
    "BaseCRUD",
    "RecordCRUD",
    "record_crud",
]

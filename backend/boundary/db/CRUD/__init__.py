"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import record_crud

    records = await record_crud.get_by_collection(db, "events")
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.record_crud import RecordCRUD, record_crud

__all__ = [
    "BaseCRUD",
    "RecordCRUD",
    "record_crud",
]

"""
ORM models for the record store.
"""

from backend.boundary.db.models.record_model import RecordModel

__all__ = ["RecordModel"]

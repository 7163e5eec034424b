"""
Core business logic module.

Contains the exception hierarchy and the chat context pipeline
(backend.core.context).
"""

from backend.core.exceptions import (
    AlumniConnectException,
    AssistantError,
    RecordStoreError,
    ValidationError,
)

__all__ = [
    "AlumniConnectException",
    "AssistantError",
    "RecordStoreError",
    "ValidationError",
]

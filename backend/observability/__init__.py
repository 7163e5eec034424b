"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from backend.observability.correlation import get_correlation_id, set_correlation_id
from backend.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]

"""
Health check response model.

Dependencies: pydantic
System role: Health API contract
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str

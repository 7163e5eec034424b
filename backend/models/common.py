"""
Common response models.

Error body shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema; the message never carries internal detail."""

    error: str = Field(description="Error message")

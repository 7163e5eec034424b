"""
API schemas.
"""

from backend.models.chat import ChatbotRequest, ChatbotResponse
from backend.models.common import ErrorResponse
from backend.models.health import HealthResponse

__all__ = ["ChatbotRequest", "ChatbotResponse", "ErrorResponse", "HealthResponse"]

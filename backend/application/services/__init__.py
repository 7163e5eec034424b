"""Service orchestrators."""

from .chatbot_service import ChatbotService

__all__ = ["ChatbotService"]

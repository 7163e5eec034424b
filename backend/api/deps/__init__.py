"""API-specific dependencies."""

from .dependencies import (
    get_assistant_model,
    get_chatbot_service,
    get_context_aggregator,
    get_record_store,
    get_settings_dependency,
)

__all__ = [
    "get_assistant_model",
    "get_chatbot_service",
    "get_context_aggregator",
    "get_record_store",
    "get_settings_dependency",
]

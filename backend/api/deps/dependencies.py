"""
Dependency injection container.

Factory functions for FastAPI dependencies. Process-wide clients live on
``app.state`` (set up in the lifespan) and are handed to per-request
services from here.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

from fastapi import Depends, Request

from backend.application.services import ChatbotService
from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.llm.assistant_model import AssistantModel
from backend.configs import Settings, get_settings
from backend.core.context import ContextAggregator, RecordStoreGateway


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_record_store(request: Request) -> RecordStoreClient:
    """
    Get the process-wide record store client.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        RecordStoreClient: Client initialized during startup
    """
    return request.app.state.record_store


def get_assistant_model(request: Request) -> AssistantModel:
    """
    Get the process-wide chat model client.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        AssistantModel: Lazily connected model wrapper
    """
    return request.app.state.assistant_model


def get_context_aggregator(
    store: RecordStoreClient = Depends(get_record_store),
    settings: Settings = Depends(get_settings_dependency),
) -> ContextAggregator:
    """
    Get context aggregator over the record store.

    Args:
        store: Record store client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ContextAggregator: Aggregator for the configured collections
    """
    return ContextAggregator(
        gateway=RecordStoreGateway(store),
        collections=settings.collections,
    )


def get_chatbot_service(
    aggregator: ContextAggregator = Depends(get_context_aggregator),
    assistant_model: AssistantModel = Depends(get_assistant_model),
) -> ChatbotService:
    """
    Get chatbot service instance.

    Args:
        aggregator: Context aggregator (injected via Depends)
        assistant_model: Chat model client (injected via Depends)

    Returns:
        ChatbotService: Service for one request
    """
    return ChatbotService(aggregator=aggregator, assistant_model=assistant_model)

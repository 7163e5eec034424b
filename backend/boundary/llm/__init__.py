"""
Language model boundary.

Wraps the chat model provider behind AssistantModel.
"""

from backend.boundary.llm.assistant_model import AssistantModel

__all__ = ["AssistantModel"]

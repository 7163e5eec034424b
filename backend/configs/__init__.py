"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.collections import CollectionSettings
from backend.configs.database import DatabaseSettings
from backend.configs.llm import LLMSettings
from backend.configs.server import ServerSettings
from backend.configs.settings import Settings, get_settings

__all__ = [
    "CollectionSettings",
    "DatabaseSettings",
    "LLMSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
]

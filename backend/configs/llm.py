"""
Language model configuration settings.

Credential and model selection for the alumni assistant chat model.

Dependencies: pydantic_settings
System role: LLM endpoint configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


DEFAULT_MODEL_ID = "gemini-2.0-flash"


class LLMSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(env_prefix="LLM_")

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GOOGLE_API_KEY"),
        description="Model provider API key (absence only fails chat calls)",
    )
    model: str = Field(default=DEFAULT_MODEL_ID, description="Chat model identifier")
    temperature: float = Field(default=0.3, description="Sampling temperature")

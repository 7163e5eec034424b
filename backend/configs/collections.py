"""
Record store collection names.

The six collections read for every chatbot request.

Dependencies: pydantic_settings
System role: Collection name configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class CollectionSettings(BaseSettings):
    """Collection names, overridable with COLLECTION_* variables."""

    model_config = SettingsConfigDict(env_prefix="COLLECTION_")

    events: str = Field(default="events")
    fundraising: str = Field(default="fundraising")
    internships: str = Field(default="internships")
    notifications: str = Field(default="notifications")
    users: str = Field(default="users")
    mentorship: str = Field(default="mentorship")

"""
Chatbot request/response schemas.

Dependencies: pydantic
System role: Chatbot API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class ChatbotRequest(BaseModel):
    """Request schema for a chatbot message."""

    model_config = ConfigDict(extra="ignore")

    message: str | None = Field(default=None, description="User question")


class ChatbotResponse(BaseModel):
    """Successful chatbot reply."""

    reply: str = Field(description="Model reply, HTML formatted")

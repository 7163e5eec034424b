"""
Alumni assistant chat model.

Thin wrapper over the LangChain Google GenAI chat model. The provider
client is built on first use, so a missing API key fails the chat call
and never application startup.

Dependencies: langchain_core, langchain_google_genai, backend.configs
System role: Language model endpoint client
"""

import logging
from collections.abc import Sequence
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from backend.configs import Settings, get_settings
from backend.configs.llm import DEFAULT_MODEL_ID
from backend.core.exceptions import AssistantError

logger = logging.getLogger(__name__)


def content_to_text(content: Any) -> str:
    """
    Flatten a chat message content payload to plain text.

    Providers return either a string or a list of content blocks
    (strings or ``{"type": "text", "text": ...}`` dicts).

    Args:
        content: AIMessage.content

    Returns:
        str: Concatenated text parts
    """
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type", "text") == "text":
            parts.append(str(block.get("text", "")))
    return "".join(parts)


class AssistantModel:
    """
    Chat completion client for the alumni assistant.

    Sends a system + user message pair and returns the reply text verbatim.
    No retries and no timeouts are applied here.
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL_ID,
        api_key: str | None = None,
        temperature: float = 0.3,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize assistant model without contacting the provider.

        Args:
            model_id: Provider model identifier
            api_key: Provider API key (may be None until a call is made)
            temperature: Sampling temperature
            chat_model: Prebuilt LangChain chat model, bypassing lazy construction
        """
        self.model_id = model_id
        self._api_key = api_key
        self._temperature = temperature
        self._chat_model = chat_model

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AssistantModel":
        """
        Build the assistant model from application settings.

        Args:
            settings: Application settings (defaults to get_settings())

        Returns:
            AssistantModel: Unconnected model wrapper
        """
        llm_config = (settings or get_settings()).llm
        return cls(
            model_id=llm_config.model,
            api_key=llm_config.api_key,
            temperature=llm_config.temperature,
        )

    @property
    def has_credentials(self) -> bool:
        """True when a model is injected or an API key is configured."""
        return self._chat_model is not None or bool(self._api_key)

    def _get_chat_model(self) -> BaseChatModel:
        if self._chat_model is None:
            if not self._api_key:
                raise AssistantError(
                    "Model API key is not configured",
                    model_id=self.model_id,
                )
            self._chat_model = ChatGoogleGenerativeAI(
                model=self.model_id,
                google_api_key=self._api_key,
                temperature=self._temperature,
            )
            logger.info(f"{__name__}:_get_chat_model - Chat model created model={self.model_id}")
        return self._chat_model

    async def complete(self, messages: Sequence[BaseMessage]) -> str:
        """
        Send messages to the chat model and return its reply.

        Args:
            messages: System and user messages, in order

        Returns:
            str: Reply text

        Raises:
            AssistantError: If credentials are missing or the provider call fails
        """
        chat_model = self._get_chat_model()
        try:
            response = await chat_model.ainvoke(list(messages))
        except Exception as e:
            raise AssistantError(
                f"Chat model call failed: {type(e).__name__}",
                model_id=self.model_id,
            ) from e

        reply = content_to_text(response.content)
        logger.info(
            f"{__name__}:complete - Reply received model={self.model_id} reply_len={len(reply)}"
        )
        return reply

"""
Test suite for AssistantModel.

The provider client is replaced with LangChain's fake chat model or
patched out; no network calls are made.

System role: Verification of the language model boundary
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from backend.boundary.llm.assistant_model import AssistantModel, content_to_text
from backend.configs.llm import DEFAULT_MODEL_ID
from backend.core.exceptions import AssistantError

MESSAGES = [SystemMessage(content="persona"), HumanMessage(content="Alumni database:\n...\n\nUser question: Hello")]


class TestComplete:
    """Test suite for AssistantModel.complete."""

    @pytest.mark.asyncio
    async def test_complete_should_return_reply_text(self) -> None:
        model = AssistantModel(chat_model=FakeListChatModel(responses=["<p>Hi there</p>"]))

        reply = await model.complete(MESSAGES)

        assert reply == "<p>Hi there</p>"

    @pytest.mark.asyncio
    async def test_missing_api_key_should_raise_at_call_time(self) -> None:
        model = AssistantModel(api_key=None)

        assert not model.has_credentials
        with pytest.raises(AssistantError, match="API key"):
            await model.complete(MESSAGES)

    @pytest.mark.asyncio
    async def test_provider_failure_should_be_wrapped(self) -> None:
        chat_model = MagicMock()
        chat_model.ainvoke = AsyncMock(side_effect=ConnectionError("network down"))
        model = AssistantModel(model_id="gemini-test", chat_model=chat_model)

        with pytest.raises(AssistantError) as exc_info:
            await model.complete(MESSAGES)

        assert exc_info.value.details["model_id"] == "gemini-test"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_chat_model_should_be_built_once_with_settings(self) -> None:
        fake = FakeListChatModel(responses=["one", "two"])
        with patch(
            "backend.boundary.llm.assistant_model.ChatGoogleGenerativeAI",
            return_value=fake,
        ) as chat_cls:
            model = AssistantModel(model_id="gemini-test", api_key="key-123", temperature=0.1)
            first = await model.complete(MESSAGES)
            second = await model.complete(MESSAGES)

        chat_cls.assert_called_once_with(
            model="gemini-test",
            google_api_key="key-123",
            temperature=0.1,
        )
        assert (first, second) == ("one", "two")


class TestFromSettings:
    """Test suite for AssistantModel.from_settings."""

    def test_from_settings_should_read_llm_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from backend.configs import Settings

        monkeypatch.setenv("LLM_API_KEY", "env-key")
        monkeypatch.setenv("LLM_MODEL", "gemini-custom")

        model = AssistantModel.from_settings(Settings())

        assert model.model_id == "gemini-custom"
        assert model.has_credentials

    def test_default_model_should_be_documented_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from backend.configs import Settings

        monkeypatch.delenv("LLM_MODEL", raising=False)

        assert AssistantModel.from_settings(Settings()).model_id == DEFAULT_MODEL_ID


class TestContentToText:
    """Test suite for content_to_text."""

    def test_string_content_should_pass_through(self) -> None:
        assert content_to_text("hello") == "hello"

    def test_block_content_should_join_text_parts(self) -> None:
        content = [
            {"type": "text", "text": "Hello "},
            {"type": "image_url", "image_url": "x"},
            "world",
        ]

        assert content_to_text(content) == "Hello world"

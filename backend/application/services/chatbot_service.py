"""
Chatbot service for alumni Q&A.

Orchestrates one chat request: gather the six collections, build the
prompt, call the chat model and return its reply verbatim.

Dependencies: backend.core.context, backend.boundary.llm
System role: Chatbot orchestration layer
"""

import logging

from backend.boundary.llm.assistant_model import AssistantModel
from backend.core.context.aggregator import ContextAggregator
from backend.core.context.prompt import build_messages
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ChatbotService:
    """
    Stateless alumni assistant service.

    Nothing is kept between calls: each answer gathers fresh context.
    """

    def __init__(
        self,
        aggregator: ContextAggregator,
        assistant_model: AssistantModel,
    ) -> None:
        """
        Initialize chatbot service.

        Args:
            aggregator: Context aggregator over the record store
            assistant_model: Chat model client
        """
        self.aggregator = aggregator
        self.assistant_model = assistant_model

    async def answer(self, message: str) -> str:
        """
        Answer one user message.

        Flow:
        1. Gather the context bundle (six concurrent reads)
        2. Build the system/user message pair
        3. Call the chat model

        Args:
            message: User's question

        Returns:
            str: Model reply, unmodified

        Raises:
            AssistantError: If the chat model is misconfigured or fails
        """
        logger.info(f"{__name__}:answer - START message_len={len(message)}")

        bundle = await self.aggregator.gather()
        messages = build_messages(bundle, message)
        log_with_context(
            logger,
            logging.DEBUG,
            f"{__name__}:answer - Prompt built",
            bundle_sizes=" ".join(f"{name}={len(records)}" for name, records in vars(bundle).items()),
            user_content_len=len(str(messages[-1].content)),
        )

        reply = await self.assistant_model.complete(messages)
        logger.info(f"{__name__}:answer - DONE reply_len={len(reply)}")
        return reply

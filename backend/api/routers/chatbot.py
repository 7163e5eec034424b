"""Chatbot API endpoint.

Routes:
- POST /chatbot (and /chatbot/) - Answer an alumni question using the record store as context

Dependencies: backend.application.services.chatbot_service
System role: Chatbot HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.api.deps import get_chatbot_service
from backend.application.services import ChatbotService
from backend.core.exceptions import ValidationError
from backend.models.chat import ChatbotRequest, ChatbotResponse
from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chatbot", tags=["chatbot"])

MESSAGE_REQUIRED = "Message is required"
AI_ERROR = "Error contacting AI"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an ``{"error": ...}`` JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "",
    response_model=ChatbotResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.post("/", response_model=ChatbotResponse, include_in_schema=False)
async def chatbot(
    request: ChatbotRequest,
    chatbot_service: ChatbotService = Depends(get_chatbot_service),
):
    """Answer a user message with the alumni assistant.

    Flow:
    1. Validate the message is present
    2. Gather context, build prompt and call the model (ChatbotService)
    3. Return the reply verbatim

    Args:
        request: ChatbotRequest with the user's message
        chatbot_service: Injected ChatbotService

    Returns:
        ChatbotResponse | JSONResponse: ``{"reply"}`` or ``{"error"}``
    """
    try:
        if not request.message:
            raise ValidationError(MESSAGE_REQUIRED, field="message")

        reply = await chatbot_service.answer(request.message)
        return ChatbotResponse(reply=reply)

    except ValidationError as e:
        logger.info(f"{__name__}:chatbot - Rejected request: {e}")
        return error_response(400, e.message)
    except Exception as e:
        # Cause stays in the server log only
        logger.exception(f"{__name__}:chatbot - {type(e).__name__}: {e}")
        return error_response(500, AI_ERROR)

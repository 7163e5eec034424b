"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware and error
handlers, and configures lifespan.

Dependencies: fastapi, uvicorn, backend.api, backend.boundary, backend.observability, backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
from functools import partial
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.api import api_router
from backend.api.routers.chatbot import MESSAGE_REQUIRED
from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.llm.assistant_model import AssistantModel
from backend.configs import get_settings
from backend.models.common import ErrorResponse
from backend.observability.logger import configure_logging
from backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    app: FastAPI,
    record_store: RecordStoreClient | None = None,
    assistant_model: AssistantModel | None = None,
):
    """
    Application lifespan context manager.

    Builds the record store client and chat model once per process unless
    create_app() was handed prebuilt ones. A record store that cannot be
    initialized aborts startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting Alumni Chatbot API")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Model API key: {'Present' if settings.llm.api_key else 'Missing'}")

    record_store = record_store or RecordStoreClient.from_settings(settings)
    assistant_model = assistant_model or AssistantModel.from_settings(settings)

    try:
        await record_store.initialize()
        await record_store.create_tables()
    except Exception:
        logger.exception("Failed to initialize record store")
        await record_store.dispose()
        raise

    app.state.record_store = record_store
    app.state.assistant_model = assistant_model
    logger.info("Application startup complete")

    yield

    await record_store.dispose()
    logger.info("Application shutdown")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies the same way as a missing message."""
    logger.info(f"{request.method} {request.url.path} - invalid body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=MESSAGE_REQUIRED).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; details go to the log only."""
    logger.error(f"Server error: {type(exc).__name__}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def create_app(
    record_store: RecordStoreClient | None = None,
    assistant_model: AssistantModel | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        record_store: Prebuilt record store client (built from settings when omitted)
        assistant_model: Prebuilt chat model client (built from settings when omitted)

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Alumni Chatbot API",
        description="AI alumni assistant backed by the alumni record store",
        version="0.1.0",
        lifespan=partial(lifespan, record_store=record_store, assistant_model=assistant_model),
    )

    # Added first = innermost; correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=settings.server.cors_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.debug,
    )

"""
API routes module.

FastAPI routers for all HTTP endpoints, assembled under one APIRouter.
"""

from fastapi import APIRouter

from .routers import chatbot_router, health_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(chatbot_router)

__all__ = ["api_router"]

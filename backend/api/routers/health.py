"""
Health check API endpoint.

Routes: GET /health

Dependencies: fastapi
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from backend.models.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check with the current UTC time."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )

"""
Health check API endpoints.

Routes: GET /health, GET /health/gateway

Dependencies: bible_portal.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from bible_portal.api.deps import get_settings_dependency
from bible_portal.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/gateway", response_model=HealthResponse)
async def health_check_gateway(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """AI gateway configuration check (no upstream call)."""
    if not settings.ai_gateway.is_configured:
        return HealthResponse(status="degraded", message="AI gateway API key not configured")
    return HealthResponse(status="healthy", message=f"AI gateway model {settings.ai_gateway.model}")

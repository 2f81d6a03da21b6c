"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and environment.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.shared.responses import ResponseEnvelope, success

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Data returned by the health endpoint."""

    status: str
    version: str
    env: str


@router.get(
    "/health",
    response_model=ResponseEnvelope[HealthResponse],
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> ResponseEnvelope:
    """Return current application health status."""
    settings = request.app.state.settings
    return success(
        data=HealthResponse(status="ok", version=settings.version, env=settings.app_env)
    )

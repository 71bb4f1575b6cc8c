"""
Liveness endpoint for the sample host application.

Reports the configured service name and version so deployments can
confirm which build is serving requests.
"""

from fastapi import APIRouter

from json_validation.core.config import settings
from json_validation.interfaces.schemas import HealthResponse

HEALTHY = "ok"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health() -> HealthResponse:
    return HealthResponse(
        status=HEALTHY, name=settings.project_name, version=settings.version
    )

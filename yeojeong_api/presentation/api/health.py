from fastapi import APIRouter, Depends

from ...config import Settings
from ...infrastructure.clock import utc_timestamp
from .dependencies import get_settings
from .schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.api_route(
    "/health",
    methods=["GET", "HEAD"],
    summary="Health check",
    response_model=HealthResponse,
)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Basic health check for load balancer."""
    return HealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        environment=settings.environment,
        version=settings.version,
    )

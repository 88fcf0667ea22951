"""
UserBoard Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring checks.
How:   Pings the configured repository and reports aggregate status.
Who:   Called by Docker health checks and uptime monitors.

Status levels:
    - healthy:   storage answered the ping
    - unhealthy: storage did not answer
"""

import logging
import time

from fastapi import APIRouter, Depends

from userboard import __version__
from userboard.dependencies import get_repository
from userboard.repositories.base import UserRepository
from userboard.schemas.user import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    repository: UserRepository = Depends(get_repository),
) -> HealthResponse:
    """
    Check the health of the service and its storage.

    The in-memory backend always answers; the SQL backend runs SELECT 1.
    """
    storage_status = "connected"
    overall = "healthy"

    if not await repository.ping():
        storage_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: storage unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        storage_backend=repository.backend_name,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )

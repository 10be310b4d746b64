"""
QuickNotes Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the active note store and reports the aggregate status.
Who:   Docker health checks and uptime monitors.

Status levels:
    - healthy:   the store answered its ping
    - unhealthy: the store is unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response, status

from quicknotes import __version__
from quicknotes.dependencies import get_store
from quicknotes.schemas.note import HealthResponse
from quicknotes.services.store_base import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: NoteStore = Depends(get_store),
) -> HealthResponse:
    """Probe the store and return status, version and uptime."""
    reachable = await store.ping()
    if not reachable:
        logger.warning("Health check: %s store unreachable", store.backend_name)
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if reachable else "unhealthy",
        version=__version__,
        store=store.backend_name,
        database="connected" if reachable else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )

"""
Student Council API — Health Check Route
==========================================

What:  Liveness endpoint for monitors and the frontend's connection check.
How:   There are no external dependencies to probe; if the process answers,
       it is healthy.
"""

import time

from fastapi import APIRouter

from council import __version__
from council.schemas.common import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="OK",
        message="SIT Council API is running",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )

"""
Liveness and readiness endpoints for the employee service.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Response, status

from employee_api import __version__
from employee_api.core import database, probes
from employee_api.schemas.health import (
    DatabaseCheck,
    HealthResponse,
    ReadinessResponse,
)


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    return HealthResponse(version=__version__, timestamp=datetime.now(timezone.utc))


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Runs SELECT 1 against the employee database; 503 when it fails or times out.",
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ReadinessResponse}},
)
async def readiness_check(response: Response) -> ReadinessResponse:
    started = time.perf_counter()
    db_healthy = await probes.check_database()

    db_check = DatabaseCheck(
        backend=database.engine.url.get_backend_name(),
        healthy=db_healthy,
        latency_ms=round((time.perf_counter() - started) * 1000, 2),
        error=None if db_healthy else "Employee database unreachable or timed out",
    )

    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status="ready" if db_healthy else "not_ready",
        checks={"db": db_check},
        timestamp=datetime.now(timezone.utc),
    )

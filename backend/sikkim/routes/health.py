"""
Sikkim Tourism Backend — Health Check Route
=============================================

What:  Liveness endpoint for monitors and load balancers.
How:   Returns a fixed status marker and the current UTC time. It does not
       touch the database, so it always succeeds while the process is up.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from sikkim.schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


def utc_timestamp() -> str:
    """Current time as ISO 8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", time=utc_timestamp())

"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from amp_validator.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """System health check with engine status.

    The engine loads lazily, so an uninitialized engine is reported as
    degraded rather than unhealthy.
    """
    context = request.app.state.validator_context
    engine_state = context.state.value

    return HealthResponse(
        status="healthy" if context.is_ready else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        engine=engine_state,
    )

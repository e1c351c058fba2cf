"""
Health Router - Health checks and store status endpoints
"""

from fastapi import APIRouter, Depends

from api.schemas.system import ReadinessResponse
from api.dependencies import get_app_state, AppState

router = APIRouter()


@router.get("/ready", response_model=ReadinessResponse)
async def health_check_ready(state: AppState = Depends(get_app_state)) -> ReadinessResponse:
    """
    Kubernetes readiness probe.

    Returns ready=True once application startup has completed.
    """
    return ReadinessResponse(
        ready=state.is_ready(),
        details=state.get_status()
    )

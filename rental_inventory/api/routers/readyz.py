from fastapi import APIRouter, Depends

from rental_inventory.api.deps import get_health_service
from rental_inventory.schemas.common import ErrorResponse, OkResponse
from rental_inventory.services.health import HealthService

router = APIRouter(prefix="/readyz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Readiness check",
    description="Runs SELECT 1 against the database; 503 when it is unreachable.",
)
async def readyz(svc: HealthService = Depends(get_health_service)):
    return await svc.ok()

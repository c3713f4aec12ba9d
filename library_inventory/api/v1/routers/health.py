"""Health check endpoints."""

from fastapi import APIRouter, status

from library_inventory.core.config import settings
from library_inventory.core.constants import HEALTH_MESSAGE, HEALTH_STATUS
from library_inventory.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Check if the API is running and healthy",
)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status=HEALTH_STATUS, message=HEALTH_MESSAGE, version=settings.api_version
    )

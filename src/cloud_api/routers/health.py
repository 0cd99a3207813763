from fastapi import APIRouter, Depends

from cloud_api.config.settings import Settings
from cloud_api.dependencies import get_app_settings
from cloud_api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """
    Health check endpoint for monitoring API status.

    Reports the backend configuration without calling either backend.
    """
    return HealthResponse(
        status="ok",
        region=settings.aws_region,
        table_name=settings.dynamodb_table_name,
    )

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from textstats.api.dependencies import get_settings
from textstats.api.schemas import HealthData, HealthEnvelope
from textstats.config.settings import Settings

router = APIRouter()


@router.get("/health", response_model=HealthEnvelope, tags=["System"])
def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Check the health of the API."""
    return HealthEnvelope(
        message="API is running successfully",
        data=HealthData(
            timestamp=datetime.now(timezone.utc), environment=settings.app_env
        ),
    )

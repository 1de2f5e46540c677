import logging
from datetime import datetime, timezone

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "management"


@router.get("", summary="Health Check")
async def health_check():
    logger.debug("Health check requested")
    return {
        "healthy": True,
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

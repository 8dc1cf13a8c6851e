"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_optional_word_repo
from port.word_repository import WordRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(repo: WordRepository | None = Depends(get_optional_word_repo)):
    """Health check endpoint with word store status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    if repo is not None and repo.ping():
        health_status["services"]["database"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
        status_code = status.HTTP_200_OK
    else:
        health_status["services"]["database"] = {
            "status": "unhealthy",
            "message": "Not initialized" if repo is None else "Connection failed"
        }
        health_status["status"] = "degraded"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Health check degraded: word store unreachable")

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )

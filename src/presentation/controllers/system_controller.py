"""System endpoints exposing service health."""

from fastapi import APIRouter, Request

from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health")
async def health(request: Request) -> dict:
    """Return the liveness status of the service."""
    started_at = getattr(request.app.state, "started_at", None)
    logger.debug("health.check.success")
    return {
        "status": "up",
        "title": request.app.title,
        "version": request.app.version,
        "started_at": started_at.isoformat() if started_at else None,
    }

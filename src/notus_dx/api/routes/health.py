"""Health check endpoints."""

from fastapi import APIRouter, Depends

from notus_dx import __version__
from notus_dx.api.dependencies import get_app_settings
from notus_dx.config import Settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "notus-dx"}


@router.get("/health/detailed")
async def detailed_health(settings: Settings = Depends(get_app_settings)):
    """Detailed health check with configuration info."""
    return {
        "status": "healthy",
        "service": "notus-dx",
        "version": __version__,
        "config": settings.get_safe_dict(),
    }

"""Health check endpoint."""

from fastapi import APIRouter

from infrastructure.config import Settings
from presentation.api.routing import TranslatingRoute
from presentation.schemas import HealthResponse


def create_health_router(settings: Settings) -> APIRouter:
    """Build the health route for the given settings."""
    router = APIRouter(tags=["health"], route_class=TranslatingRoute)

    @router.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """
        Health check endpoint.
        
        Returns service status, version and active profile.
        """
        return HealthResponse(
            status="healthy",
            version=settings.app_version,
            profile=settings.active_profile,
        )

    return router

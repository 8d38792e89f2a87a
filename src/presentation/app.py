"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import Settings, get_logger, get_settings, setup_logger
from presentation.api.error_handlers import register_error_handlers
from presentation.api.middleware import RequestLoggingMiddleware
from presentation.api.v1.dependencies import AppDependencies, build_dependencies


def create_app(
    settings: Optional[Settings] = None,
    dependencies: Optional[AppDependencies] = None,
) -> FastAPI:
    """
    Create the FastAPI application.
    
    Args:
        settings: Configuration, read from the environment if omitted
        dependencies: Prebuilt object graph, built from settings if omitted
        
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    setup_logger(level=settings.log_level, log_format=settings.log_format)
    logger = get_logger(__name__)

    deps = dependencies or build_dependencies(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        await deps.startup()
        logger.info(f"{settings.app_name} started (profile={settings.active_profile})")
        
        yield
        
        # Shutdown
        await deps.shutdown()
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
        lifespan=lifespan,
    )
    app.state.dependencies = deps

    # Middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    for router in deps.routers:
        app.include_router(router, prefix=settings.api_prefix)

    return app

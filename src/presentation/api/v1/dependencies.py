"""Composition root: builds the object graph once, in dependency order."""

from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter
from sqlalchemy.ext.asyncio import AsyncEngine

from application.services import EmployeeService
from domain.repositories import IEmployeeRepository
from infrastructure.config import Settings, get_logger
from infrastructure.database import create_engine, create_session_factory, init_db, close_db
from infrastructure.database.repositories import (
    InMemoryEmployeeRepository,
    SQLAlchemyEmployeeRepository,
)
from presentation.api.v1.endpoints import greetings
from presentation.api.v1.endpoints.employees import create_employee_router
from presentation.api.v1.endpoints.health import create_health_router

logger = get_logger(__name__)


@dataclass
class AppDependencies:
    """Everything the application holds for the lifetime of the process."""

    settings: Settings
    employee_repository: IEmployeeRepository
    employee_service: EmployeeService
    routers: list[APIRouter] = field(default_factory=list)
    engine: Optional[AsyncEngine] = None

    async def startup(self) -> None:
        """Prepare the backing store."""
        if self.engine is not None:
            await init_db(self.engine, self.settings.schema_update_mode)

    async def shutdown(self) -> None:
        """Release the backing store."""
        await self.employee_repository.close()
        if self.engine is not None:
            await close_db(self.engine)


def build_employee_repository(
    settings: Settings,
) -> tuple[IEmployeeRepository, Optional[AsyncEngine]]:
    """Pick the repository implementation for the configured datasource."""
    if settings.uses_in_memory_store:
        logger.info("Using in-memory employee store")
        return InMemoryEmployeeRepository(), None

    engine = create_engine(settings)
    logger.info(f"Using SQL employee store ({engine.url.drivername})")
    repository = SQLAlchemyEmployeeRepository(
        create_session_factory(engine),
        timeout_seconds=settings.database_timeout_seconds,
    )
    return repository, engine


def build_dependencies(
    settings: Settings,
    employee_repository: Optional[IEmployeeRepository] = None,
) -> AppDependencies:
    """
    Construct repository, service and routers.
    
    Args:
        settings: Configuration values for this process
        employee_repository: Store to use instead of the configured one
        
    Returns:
        The assembled object graph
    """
    engine = None
    if employee_repository is None:
        employee_repository, engine = build_employee_repository(settings)

    employee_service = EmployeeService(employee_repository)

    routers = [
        create_health_router(settings),
        greetings.router,
        create_employee_router(employee_service),
    ]

    return AppDependencies(
        settings=settings,
        employee_repository=employee_repository,
        employee_service=employee_service,
        routers=routers,
        engine=engine,
    )

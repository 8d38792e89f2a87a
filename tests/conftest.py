"""Pytest configuration and shared fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from application.services import EmployeeService
from domain.entities import Employee
from infrastructure.config import Settings
from infrastructure.database.repositories import InMemoryEmployeeRepository
from presentation.api.v1.dependencies import build_dependencies
from presentation.app import create_app


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, log_level="WARNING", log_format="text")


@pytest.fixture
def employee_repository():
    """Fixture for an empty in-memory employee store."""
    return InMemoryEmployeeRepository()


@pytest.fixture
def employee_service(employee_repository):
    """Fixture for a service backed by the in-memory store."""
    return EmployeeService(employee_repository)


@pytest.fixture
def john():
    """Fixture for an unsaved employee."""
    return Employee(name="John", department="IT")


@pytest.fixture
def app(settings, employee_repository):
    """Application wired to the in-memory store."""
    dependencies = build_dependencies(settings, employee_repository=employee_repository)
    return create_app(settings, dependencies)


@pytest.fixture
async def client(app):
    """HTTP client talking to the application in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

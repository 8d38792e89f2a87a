"""Repository implementations."""

from .in_memory_repository import InMemoryRepository, InMemoryEmployeeRepository
from .sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryEmployeeRepository",
    "SQLAlchemyEmployeeRepository",
]

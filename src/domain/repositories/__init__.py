"""Domain Repository Interfaces - Abstract definitions."""

from .repository import IRepository
from .employee_repository import IEmployeeRepository

__all__ = ["IRepository", "IEmployeeRepository"]

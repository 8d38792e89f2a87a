"""Employee repository interface - Abstract definition."""

from domain.entities import Employee

from .repository import IRepository


class IEmployeeRepository(IRepository[Employee]):
    """Contract for employee persistence."""

"""SQLAlchemy ORM models."""

from .employee_model import MAX_EMPLOYEE_ID, EmployeeModel

__all__ = ["EmployeeModel", "MAX_EMPLOYEE_ID"]

"""Domain Value Objects - Immutable objects without identity."""

from .employee_draft import EmployeeDraft

__all__ = ["EmployeeDraft"]

"""Employee draft value object carrying unvalidated input."""

from dataclasses import dataclass
from typing import Optional


REQUIRED_FIELDS = ("name", "department")


@dataclass(frozen=True)
class EmployeeDraft:
    """
    Immutable value object with the fields submitted for an employee.

    No business rule is applied here; the service decides whether a
    draft can become an Employee.

    Attributes:
        name: Employee name as submitted
        department: Department name as submitted
    """

    name: Optional[str] = None
    department: Optional[str] = None

    def missing_fields(self) -> list[str]:
        """Required fields that are absent or blank."""
        return [
            field_name
            for field_name in REQUIRED_FIELDS
            if not (getattr(self, field_name) or "").strip()
        ]

"""Employee entity."""

from dataclasses import dataclass

from .base import Entity


@dataclass(frozen=True, kw_only=True)
class Employee(Entity):
    """
    Entity representing an employee of the organisation.

    Instances are never changed in place; repositories store a new
    version under the same id instead.
    """

    name: str
    department: str

    def __str__(self) -> str:
        return f"Employee(id={self.id}, name={self.name}, department={self.department})"

"""Domain Entities - Objects with identity."""

from .base import Entity
from .employee import Employee

__all__ = ["Entity", "Employee"]

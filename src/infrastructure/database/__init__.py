"""Database infrastructure module."""

from .session import Base, create_engine, create_session_factory, init_db, close_db
from .models import EmployeeModel

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "init_db",
    "close_db",
    "EmployeeModel",
]

"""Pydantic schemas for request/response validation."""

from .employee_schemas import EmployeeRequest, EmployeeResponse
from .common_schemas import ErrorBody, ErrorResponse, HealthResponse

__all__ = [
    "EmployeeRequest",
    "EmployeeResponse",
    "ErrorBody",
    "ErrorResponse",
    "HealthResponse",
]

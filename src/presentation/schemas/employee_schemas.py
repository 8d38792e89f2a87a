"""Employee-related Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field

from domain.entities import Employee
from domain.value_objects import EmployeeDraft


class EmployeeRequest(BaseModel):
    """
    Request schema for creating or replacing an employee.
    
    Only the shape is checked here. Whether a field may be blank is a
    business rule decided by the service.
    """
    
    name: Optional[str] = Field(None, description="Employee name", max_length=255)
    department: Optional[str] = Field(None, description="Department name", max_length=255)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "John",
                    "department": "IT"
                }
            ]
        }
    }
    
    def to_draft(self) -> EmployeeDraft:
        """Convert to a domain draft."""
        return EmployeeDraft(name=self.name, department=self.department)


class EmployeeResponse(BaseModel):
    """Response schema for a stored employee."""
    
    id: int = Field(..., description="Identifier assigned by the directory")
    name: str = Field(..., description="Employee name")
    department: str = Field(..., description="Department name")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "name": "John",
                    "department": "IT"
                }
            ]
        }
    }
    
    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        """Build the response from a stored employee."""
        return cls(id=employee.id, name=employee.name, department=employee.department)

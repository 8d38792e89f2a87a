"""Employee service enforcing business rules before persistence."""

from domain.entities import Employee
from domain.exceptions import ValidationError
from domain.repositories import IEmployeeRepository
from domain.value_objects import EmployeeDraft
from infrastructure.config import get_logger


class EmployeeService:
    """
    Business-logic layer for employees.
    
    Drafts are validated here, before the repository is touched, so a
    rejected draft never causes a partial write. Repository errors are
    propagated unchanged.
    """
    
    def __init__(self, employee_repository: IEmployeeRepository):
        """
        Initialize service.
        
        Args:
            employee_repository: Store for employee records
        """
        self.employee_repo = employee_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def save_employee(self, draft: EmployeeDraft) -> Employee:
        """
        Create an employee from a draft.
        
        Raises:
            ValidationError: If a required field is missing or blank
            StorageError: If the repository cannot store the employee
        """
        employee = self._to_employee(draft)
        saved = await self.employee_repo.create(employee)
        self.logger.info(f"Saved {saved}")
        return saved
    
    async def get_all_employees(self) -> list[Employee]:
        """Get every employee in creation order."""
        return await self.employee_repo.find_all()
    
    async def get_employee(self, employee_id: int) -> Employee:
        """Get a single employee; NotFoundError if it does not exist."""
        return await self.employee_repo.find_by_id(employee_id)
    
    async def update_employee(self, employee_id: int, draft: EmployeeDraft) -> Employee:
        """
        Replace an employee's fields with those of the draft.
        
        Raises:
            ValidationError: If a required field is missing or blank
            NotFoundError: If the employee does not exist
        """
        employee = self._to_employee(draft, employee_id=employee_id)
        updated = await self.employee_repo.update(employee)
        self.logger.info(f"Updated employee {updated.id} to version {updated.version}")
        return updated
    
    async def delete_employee(self, employee_id: int) -> None:
        """Delete an employee; NotFoundError if it does not exist."""
        await self.employee_repo.delete(employee_id)
        self.logger.info(f"Deleted employee {employee_id}")
    
    def _to_employee(self, draft: EmployeeDraft, employee_id: int | None = None) -> Employee:
        missing = draft.missing_fields()
        if missing:
            raise ValidationError(
                f"Missing required field(s): {', '.join(missing)}",
                field=missing[0],
            )
        return Employee(
            id=employee_id,
            name=draft.name.strip(),
            department=draft.department.strip(),
        )

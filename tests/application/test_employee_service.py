"""Unit tests for EmployeeService."""

from unittest.mock import AsyncMock

import pytest

from application.services import EmployeeService
from domain.exceptions import NotFoundError, StorageError, ValidationError
from domain.value_objects import EmployeeDraft


class TestSaveEmployee:
    """Test EmployeeService.save_employee()."""

    async def test_valid_draft_is_saved(self, employee_service):
        """Test that a complete draft is stored and returned with an id."""
        saved = await employee_service.save_employee(EmployeeDraft(name="John", department="IT"))
        assert saved.id == 1
        assert saved.name == "John"
        assert saved.department == "IT"

    async def test_values_are_trimmed(self, employee_service):
        """Test that surrounding whitespace is not stored."""
        saved = await employee_service.save_employee(EmployeeDraft(name="  John ", department="IT\n"))
        assert saved.name == "John"
        assert saved.department == "IT"

    @pytest.mark.parametrize(
        "draft, field",
        [
            (EmployeeDraft(department="IT"), "name"),
            (EmployeeDraft(name="John"), "department"),
            (EmployeeDraft(name="", department="IT"), "name"),
            (EmployeeDraft(name="John", department="  "), "department"),
        ],
    )
    async def test_missing_field_rejected_without_write(
        self, employee_service, employee_repository, draft, field
    ):
        """Test that a missing field raises ValidationError and stores nothing."""
        with pytest.raises(ValidationError) as exc_info:
            await employee_service.save_employee(draft)

        assert exc_info.value.field == field
        assert await employee_repository.find_all() == []

    async def test_validation_happens_before_repository_call(self):
        """Test that the repository is never called for an invalid draft."""
        repository = AsyncMock()
        service = EmployeeService(repository)

        with pytest.raises(ValidationError):
            await service.save_employee(EmployeeDraft())
        repository.create.assert_not_called()

    async def test_storage_error_propagates_unchanged(self):
        """Test that repository failures reach the caller as-is."""
        failure = StorageError("store down", operation="create")
        repository = AsyncMock()
        repository.create.side_effect = failure
        service = EmployeeService(repository)

        with pytest.raises(StorageError) as exc_info:
            await service.save_employee(EmployeeDraft(name="John", department="IT"))
        assert exc_info.value is failure


class TestReadOperations:
    """Test passthrough reads."""

    async def test_get_all_employees_empty(self, employee_service):
        """Test that no employees yields an empty list."""
        assert await employee_service.get_all_employees() == []

    async def test_get_all_employees_in_order(self, employee_service):
        """Test that employees come back in creation order."""
        for name in ("A", "B", "C"):
            await employee_service.save_employee(EmployeeDraft(name=name, department="IT"))

        employees = await employee_service.get_all_employees()
        assert [e.name for e in employees] == ["A", "B", "C"]

    async def test_get_unknown_employee(self, employee_service):
        """Test that an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await employee_service.get_employee(999)


class TestUpdateAndDelete:
    """Test EmployeeService.update_employee() and delete_employee()."""

    async def test_update_employee(self, employee_service):
        """Test that update replaces fields and bumps the version."""
        saved = await employee_service.save_employee(EmployeeDraft(name="John", department="IT"))
        updated = await employee_service.update_employee(
            saved.id, EmployeeDraft(name="John", department="Sales")
        )
        assert updated.id == saved.id
        assert updated.department == "Sales"
        assert updated.version == saved.version + 1

    async def test_update_with_invalid_draft_keeps_record(self, employee_service):
        """Test that an invalid update leaves the stored record unchanged."""
        saved = await employee_service.save_employee(EmployeeDraft(name="John", department="IT"))

        with pytest.raises(ValidationError):
            await employee_service.update_employee(saved.id, EmployeeDraft(name="John"))
        assert await employee_service.get_employee(saved.id) == saved

    async def test_update_unknown_employee(self, employee_service):
        """Test that updating an unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await employee_service.update_employee(5, EmployeeDraft(name="A", department="B"))

    async def test_delete_employee(self, employee_service):
        """Test that a deleted employee is gone."""
        saved = await employee_service.save_employee(EmployeeDraft(name="John", department="IT"))
        await employee_service.delete_employee(saved.id)
        assert await employee_service.get_all_employees() == []

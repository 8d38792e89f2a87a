"""Employee endpoints."""

from fastapi import APIRouter, Response, status

from application.services import EmployeeService
from presentation.api.routing import TranslatingRoute
from presentation.schemas import EmployeeRequest, EmployeeResponse, ErrorResponse


def create_employee_router(employee_service: EmployeeService) -> APIRouter:
    """
    Build the employee routes around a service instance.
    
    Handlers only map schemas to drafts and back; every business rule
    lives in the service and every failure goes to the error translator.
    """
    router = APIRouter(
        prefix="/employees",
        tags=["employees"],
        route_class=TranslatingRoute,
        responses={
            400: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )

    @router.get("", response_model=list[EmployeeResponse])
    async def list_employees() -> list[EmployeeResponse]:
        """List all employees in creation order."""
        employees = await employee_service.get_all_employees()
        return [EmployeeResponse.from_entity(e) for e in employees]

    @router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
    async def create_employee(request: EmployeeRequest) -> EmployeeResponse:
        """Create an employee and return it with its assigned id."""
        employee = await employee_service.save_employee(request.to_draft())
        return EmployeeResponse.from_entity(employee)

    @router.get("/{employee_id}", response_model=EmployeeResponse)
    async def get_employee(employee_id: int) -> EmployeeResponse:
        """Get one employee by id."""
        employee = await employee_service.get_employee(employee_id)
        return EmployeeResponse.from_entity(employee)

    @router.put("/{employee_id}", response_model=EmployeeResponse)
    async def update_employee(employee_id: int, request: EmployeeRequest) -> EmployeeResponse:
        """Replace an employee's fields."""
        employee = await employee_service.update_employee(employee_id, request.to_draft())
        return EmployeeResponse.from_entity(employee)

    @router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_employee(employee_id: int) -> Response:
        """Delete an employee."""
        await employee_service.delete_employee(employee_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router

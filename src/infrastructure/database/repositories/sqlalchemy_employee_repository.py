"""SQLAlchemy implementation of employee repository."""

import asyncio
from typing import Awaitable, Callable, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities import Employee
from domain.exceptions import NotFoundError, StorageError
from domain.repositories import IEmployeeRepository
from infrastructure.database.models import MAX_EMPLOYEE_ID, EmployeeModel


T = TypeVar("T")


class SQLAlchemyEmployeeRepository(IEmployeeRepository):
    """
    Concrete implementation of IEmployeeRepository using SQLAlchemy.
    
    Each call runs in its own transaction and is bounded by a timeout.
    Driver failures and timeouts surface as StorageError; cancelling the
    awaiting request cancels the database call with it.
    """
    
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        timeout_seconds: float = 5.0,
    ):
        """Initialize repository with a session factory."""
        self.session_factory = session_factory
        self.timeout_seconds = timeout_seconds
        self._closed = False
    
    async def create(self, employee: Employee) -> Employee:
        """Insert a new employee row."""
        async def op(session: AsyncSession) -> Employee:
            model = self._entity_to_model(employee)
            session.add(model)
            await session.flush()
            return self._model_to_entity(model)
        
        return await self._run("create", op)
    
    async def find_all(self) -> list[Employee]:
        """Retrieve all employees ordered by id."""
        async def op(session: AsyncSession) -> list[Employee]:
            stmt = select(EmployeeModel).order_by(EmployeeModel.id)
            result = await session.execute(stmt)
            return [self._model_to_entity(model) for model in result.scalars().all()]
        
        return await self._run("find_all", op)
    
    async def find_by_id(self, employee_id: int) -> Employee:
        """Retrieve an employee by ID."""
        async def op(session: AsyncSession) -> Employee:
            model = await self._get_model(session, employee_id)
            return self._model_to_entity(model)
        
        return await self._run("find_by_id", op)
    
    async def update(self, employee: Employee) -> Employee:
        """Overwrite the employee row and bump its version."""
        async def op(session: AsyncSession) -> Employee:
            model = await self._get_model(session, employee.id)
            self._update_model_from_entity(model, employee)
            await session.flush()
            return self._model_to_entity(model)
        
        return await self._run("update", op)
    
    async def delete(self, employee_id: int) -> None:
        """Delete an employee row."""
        async def op(session: AsyncSession) -> None:
            model = await self._get_model(session, employee_id)
            await session.delete(model)
            await session.flush()
        
        await self._run("delete", op)
    
    async def close(self) -> None:
        """Stop accepting calls; the engine is disposed by its owner."""
        self._closed = True
    
    async def _run(
        self,
        operation: str,
        op: Callable[[AsyncSession], Awaitable[T]],
    ) -> T:
        if self._closed:
            raise StorageError("Employee store is closed", operation)
        try:
            return await asyncio.wait_for(
                self._in_transaction(op),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise StorageError(f"Employee {operation} timed out", operation) from e
        except SQLAlchemyError as e:
            raise StorageError(f"Employee {operation} failed", operation) from e
    
    async def _in_transaction(self, op: Callable[[AsyncSession], Awaitable[T]]) -> T:
        async with self.session_factory() as session:
            async with session.begin():
                return await op(session)
    
    async def _get_model(self, session: AsyncSession, employee_id: int) -> EmployeeModel:
        # Ids outside the column range cannot exist; the driver would reject them
        if not 0 < employee_id <= MAX_EMPLOYEE_ID:
            raise NotFoundError("Employee", employee_id)
        model = await session.get(EmployeeModel, employee_id)
        if model is None:
            raise NotFoundError("Employee", employee_id)
        return model
    
    def _entity_to_model(self, entity: Employee) -> EmployeeModel:
        """Convert domain entity to ORM model."""
        return EmployeeModel(**entity.field_values(), version=1)
    
    def _update_model_from_entity(self, model: EmployeeModel, entity: Employee) -> None:
        """Update ORM model from domain entity."""
        for name, value in entity.field_values().items():
            setattr(model, name, value)
        model.version = model.version + 1
    
    def _model_to_entity(self, model: EmployeeModel) -> Employee:
        """Convert ORM model to domain entity."""
        return Employee(
            id=model.id,
            version=model.version,
            name=model.name,
            department=model.department,
        )

"""In-memory implementation of the repository contract."""

import threading
from dataclasses import replace

from domain.entities import Employee
from domain.exceptions import NotFoundError, StorageError
from domain.repositories import IEmployeeRepository, IRepository
from domain.repositories.repository import EntityT


class InMemoryRepository(IRepository[EntityT]):
    """
    Process-local store keyed by identifier.
    
    Every read and write goes through one lock, so id assignment is
    atomic whether callers are asyncio tasks or worker threads. The
    dict keeps insertion order, which find_all relies on.
    """
    
    resource_name = "Entity"
    
    def __init__(self):
        """Initialize an empty store."""
        self._records: dict[int, EntityT] = {}
        self._last_id = 0
        self._closed = False
        self._lock = threading.Lock()
    
    async def create(self, entity: EntityT) -> EntityT:
        """Store the entity under the next identifier."""
        with self._lock:
            self._ensure_open("create")
            self._last_id += 1
            stored = replace(entity, id=self._last_id, version=1)
            self._records[stored.id] = stored
        return stored
    
    async def find_all(self) -> list[EntityT]:
        """Return all entities in insertion order."""
        with self._lock:
            self._ensure_open("find_all")
            return list(self._records.values())
    
    async def find_by_id(self, entity_id: int) -> EntityT:
        """Return the entity with the given identifier."""
        with self._lock:
            self._ensure_open("find_by_id")
            return self._get_or_raise(entity_id)
    
    async def update(self, entity: EntityT) -> EntityT:
        """Replace the stored entity with a new version."""
        with self._lock:
            self._ensure_open("update")
            current = self._get_or_raise(entity.id)
            stored = replace(entity, id=current.id, version=current.version + 1)
            self._records[stored.id] = stored
        return stored
    
    async def delete(self, entity_id: int) -> None:
        """Remove the entity; its identifier is not handed out again."""
        with self._lock:
            self._ensure_open("delete")
            self._get_or_raise(entity_id)
            del self._records[entity_id]
    
    async def close(self) -> None:
        """Discard the store."""
        with self._lock:
            self._records.clear()
            self._closed = True
    
    def _get_or_raise(self, entity_id: int) -> EntityT:
        entity = self._records.get(entity_id)
        if entity is None:
            raise NotFoundError(self.resource_name, entity_id)
        return entity
    
    def _ensure_open(self, operation: str) -> None:
        if self._closed:
            raise StorageError(f"{self.resource_name} store is closed", operation)


class InMemoryEmployeeRepository(InMemoryRepository[Employee], IEmployeeRepository):
    """Employee store that lives for the process lifetime."""
    
    resource_name = "Employee"

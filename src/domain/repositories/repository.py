"""Generic repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from domain.entities import Entity


EntityT = TypeVar("EntityT", bound=Entity)


class IRepository(ABC, Generic[EntityT]):
    """
    Abstract CRUD store keyed by identifier.

    Identifiers are assigned by the repository, grow monotonically and
    are never reused, even after a delete. Concrete implementations
    live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, entity: EntityT) -> EntityT:
        """
        Store a new entity under a freshly assigned identifier.

        Args:
            entity: Entity to store; its id is ignored

        Returns:
            Stored entity carrying the new id and version 1

        Raises:
            StorageError: If the backing store is unavailable
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[EntityT]:
        """
        Retrieve all stored entities.

        Returns:
            Entities in insertion order, empty list if none
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: int) -> EntityT:
        """
        Retrieve an entity by identifier.

        Raises:
            NotFoundError: If no entity has that identifier
        """
        pass

    @abstractmethod
    async def update(self, entity: EntityT) -> EntityT:
        """
        Record a new version of an existing entity.

        Args:
            entity: Entity carrying the id to replace and the new fields

        Returns:
            Stored entity with its version bumped

        Raises:
            NotFoundError: If no entity has that identifier
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """
        Remove an entity.

        Raises:
            NotFoundError: If no entity has that identifier
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the backing store."""
        pass
